from dataclasses import asdict, dataclass, field
from typing import Any

from castext.enums import CASType, FileType, TransactionType

# Export names that differ from the attribute names
FIELD_ALIASES = {
    "from_": "from",
    "pan": "PAN",
    "kyc": "KYC",
    "pankyc": "PANKYC",
    "scheme_name": "scheme",
}


def _export_factory(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {FIELD_ALIASES.get(key, key): value for key, value in items}


@dataclass(slots=True)
class StatementPeriod:
    """Statement Period Data Type"""

    from_: str | None = None
    to: str | None = None


@dataclass(slots=True)
class InvestorInfo:
    """Investor Information Data Type"""

    email: str | None = None
    name: str | None = None
    mobile: str | None = None
    address: str | None = None


@dataclass(slots=True)
class SchemeValuation:
    """Point-in-time valuation of a scheme as stated in the CAS."""

    date: str | None = None
    nav: float = 0.0
    value: float = 0.0
    cost: float = 0.0


@dataclass(slots=True)
class TransactionData:
    """Transaction Data Type for CAMS"""

    date: str
    description: str
    amount: float | None
    units: float | None
    nav: float | None
    balance: float | None
    type: TransactionType


@dataclass(slots=True, kw_only=True)
class CASData:
    """Base CAS Parser return data type."""

    statement_period: StatementPeriod
    file_type: FileType = FileType.CAMS
    cas_type: CASType
    investor_info: InvestorInfo = field(default_factory=InvestorInfo)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation using the external field names."""
        return asdict(self, dict_factory=_export_factory)
