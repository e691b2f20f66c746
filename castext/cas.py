import io
import logging

from castext.detailed import parse_detailed_text
from castext.detailed.types import DetailedCASData, Scheme
from castext.enums import CASType
from castext.exceptions import InvalidInputError
from castext.parser import cas_pdf_to_text, detect_cas_type
from castext.summary import parse_summary_text
from castext.summary.types import SummaryCASData

logger = logging.getLogger(__name__)


def sort_scheme_transactions(scheme: Scheme) -> None:
    """Sort transactions of the scheme by date and re-compute running balances from the opening units."""
    sorted_transactions = sorted(scheme.transactions, key=lambda x: x.date)
    if scheme.transactions == sorted_transactions:
        return
    balance = scheme.open
    for transaction in sorted_transactions:
        balance += transaction.units or 0
        transaction.balance = balance
    scheme.transactions = sorted_transactions


def parse_cas(text: str, sort_transactions: bool = False) -> DetailedCASData | SummaryCASData:
    """
    Parse the text of a CAMS or KFintech CAS and return structured data.

    Parameters
    ----------
    text : str
        Page-oriented text of the statement as produced by :func:`cas_pdf_to_text`.
    sort_transactions : bool
        Whether to sort transactions by date and re-compute balances (detailed statements only).
    """
    if not text or not isinstance(text, str):
        raise InvalidInputError("Invalid input: text must be a non-empty string")

    cas_type = detect_cas_type(text)
    logger.debug("Detected %s statement", cas_type)
    if cas_type == CASType.SUMMARY:
        return parse_summary_text(text)

    cas_data = parse_detailed_text(text)
    if sort_transactions:
        for folio in cas_data.folios:
            for scheme in folio.schemes:
                sort_scheme_transactions(scheme)
    return cas_data


def parse_cas_pdf(
    filename: str | io.IOBase, password: str | None = None, sort_transactions: bool = False
) -> DetailedCASData | SummaryCASData:
    """
    Parse CAMS or KFintech CAS pdf and returns processed data.

    Parameters
    ----------
    filename : str | io.IOBase
        The path to the PDF file or a file-like object.
    password : str | None
        The password to unlock the PDF file.
    sort_transactions : bool
        Whether to sort transactions by date and re-compute balances.
    """
    return parse_cas(cas_pdf_to_text(filename, password), sort_transactions=sort_transactions)
