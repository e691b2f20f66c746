from castext.amc import match_amc, resolve_amc
from castext.cas import parse_cas, parse_cas_pdf
from castext.detailed.types import DetailedCASData
from castext.exceptions import CASParseError, IncorrectPasswordError, InvalidInputError, StructuralError
from castext.parser import cas_pdf_to_text, detect_cas_type
from castext.summary.types import SummaryCASData

__all__ = [
    "CASParseError",
    "DetailedCASData",
    "IncorrectPasswordError",
    "InvalidInputError",
    "StructuralError",
    "SummaryCASData",
    "cas_pdf_to_text",
    "detect_cas_type",
    "match_amc",
    "parse_cas",
    "parse_cas_pdf",
    "resolve_amc",
]
