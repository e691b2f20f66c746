from dataclasses import dataclass, field

from castext.enums import CASType
from castext.types import CASData, SchemeValuation, TransactionData


@dataclass(slots=True, frozen=True)
class SchemeInfo:
    """Fields of a scheme header line."""

    rta_code: str
    scheme_name: str
    isin: str
    advisor: str | None
    rta: str | None


@dataclass(slots=True)
class Scheme:
    """CAMS Scheme Data Type."""

    scheme_name: str
    isin: str | None
    amfi: str | None = None
    advisor: str | None = None
    rta_code: str | None = None
    rta: str | None = None
    nominees: list[str] = field(default_factory=list)
    open: float = 0.0
    close: float = 0.0
    close_calculated: float = 0.0
    valuation: SchemeValuation = field(default_factory=SchemeValuation)
    transactions: list[TransactionData] = field(default_factory=list)


@dataclass(slots=True)
class Folio:
    """Folio of an investor with a single AMC."""

    folio: str
    amc: str | None
    pan: str | None = None
    kyc: str | None = None
    pankyc: str | None = None
    schemes: list[Scheme] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class DetailedCASData(CASData):
    """Detailed CAS Parser return data type."""

    cas_type: CASType = CASType.DETAILED
    folios: list[Folio] = field(default_factory=list)
