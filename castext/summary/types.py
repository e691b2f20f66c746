from dataclasses import dataclass, field

from castext.enums import CASType
from castext.types import CASData


@dataclass(slots=True, frozen=True)
class SummaryHolding:
    """Holding row of a summary CAS, no transaction history is available."""

    folio: str
    current_value: float
    cost: float
    rta_code: str
    scheme_name: str
    units: float
    nav_date: str
    nav: float
    rta: str
    isin: str
    amc: str


@dataclass(slots=True, kw_only=True)
class SummaryCASData(CASData):
    """Summary CAS Parser return data type."""

    cas_type: CASType = CASType.SUMMARY
    current_value: float = 0.0
    cost: float = 0.0
    folios: list[SummaryHolding] = field(default_factory=list)
