import logging
import re

from castext import patterns
from castext.constants import ISIN_LENGTH, SKIP_MARKERS, STAMP_DUTY_MARKER, STT_MARKER
from castext.detailed.types import SchemeInfo
from castext.enums import SchemeInfoStatus, TransactionType
from castext.flags import TEXT_FLAGS
from castext.types import TransactionData
from castext.utils import is_date_token, parse_ledger_number, try_convert_date

logger = logging.getLogger(__name__)

# Ledger rows with a fixed description and no unit movement
TAX_ROWS = (
    (STAMP_DUTY_MARKER, "Stamp Duty", TransactionType.STAMP_DUTY_TAX),
    (STT_MARKER, "STT Paid", TransactionType.STT_TAX),
)


def get_transaction_type(description: str, units: float | None) -> TransactionType:
    """
    Get transaction type from the description text and units.

    Checks run in priority order since the categories overlap textually,
    e.g. "Purchase - reversed" is a redemption, not a purchase.
    """
    description = description.lower()
    if re.search(patterns.REDEMPTION_TXN, description):
        return TransactionType.REDEMPTION
    if re.search(patterns.PURCHASE_TXN, description):
        return TransactionType.PURCHASE
    if "switch" in description:
        return TransactionType.SWITCH_IN if (units or 0) >= 0 else TransactionType.SWITCH_OUT
    if "dividend" in description:
        return TransactionType.DIVIDEND
    if "consolidation" in description:
        return TransactionType.CONSOLIDATION
    if "cancelled" in description:
        return TransactionType.CANCELLED
    if "demat" in description:
        return TransactionType.DEMAT
    return TransactionType.OTHER


def get_parsed_scheme_name(scheme: str) -> str:
    """Helper to clean scheme names."""
    scheme = re.sub(patterns.DEMAT_QUALIFIER, " ", scheme, flags=TEXT_FLAGS).strip()
    scheme = re.sub(patterns.TRAILING_DASH, "", scheme)
    scheme = re.sub(patterns.FORMERLY, "", scheme, flags=TEXT_FLAGS)
    return re.sub(r"\s+", " ", scheme).strip()


def extract_scheme_info(line: str) -> tuple[SchemeInfoStatus, SchemeInfo | None]:
    """
    Extract scheme details from a (possibly joined) scheme header line.

    Returns ``INCOMPLETE`` when the ISIN is missing or shorter than 12 characters,
    which usually means the line was wrapped and the caller should append the next line.

    Supported line formats
    ----------------------
    - "B205RG - Axis Bluechip Fund - Regular Growth - ISIN : INF846K01164 (Advisor : DIRECT) Registrar : KFINTECH"

    - "HINFG - HDFC Infrastructure Fund - Regular Plan - Growth (Non-Demat) - ISIN : INF179K0
       1GF8 (Advisor : INZ000031633) Registrar : CAMS"
    """
    isin_match = re.search(patterns.ISIN, line)
    if not isin_match:
        return SchemeInfoStatus.INCOMPLETE, None

    isin = re.sub(r"\s+", "", isin_match.group(1))
    if len(isin) < ISIN_LENGTH:
        return SchemeInfoStatus.INCOMPLETE, None
    if len(isin) > ISIN_LENGTH:
        return SchemeInfoStatus.INVALID, None

    code, *name_parts = line[: isin_match.start()].split("-")
    if not name_parts:
        return SchemeInfoStatus.INVALID, None

    advisor_match = re.search(patterns.ADVISOR, line, TEXT_FLAGS)
    registrar_match = re.search(patterns.REGISTRAR, line)
    return SchemeInfoStatus.OK, SchemeInfo(
        rta_code=re.sub(r"\s+", "", code),
        scheme_name=get_parsed_scheme_name("-".join(name_parts)),
        isin=isin,
        advisor=re.sub(r"\s+", "", advisor_match.group(1)) if advisor_match else None,
        rta=registrar_match.group(1) if registrar_match else None,
    )


def _row_date(token: str, line: str) -> str | None:
    if (date := try_convert_date(token)) is None:
        logger.debug("Skipping row with invalid date: %s", line)
    return date


def parse_transaction_line(line: str) -> TransactionData | None:
    """
    Parse a single ledger row.

    Columns are ``DATE AMOUNT NAV UNITS DESCRIPTION... BALANCE``, amounts and units
    in parentheses are negative.

    Supported line formats
    ----------------------
    - "10-Jan-2024 1,000.00 45.1234 22.161 Purchase - SIP Instalment 1 22.161"

    - "15-Mar-2024 (5,000.00) 48.2000 (103.734) Redemption 118.427"

    - "10-Jan-2024 0.05 *** Stamp Duty ***"
    """
    parts = line.split()
    for marker, description, txn_type in TAX_ROWS:
        if marker in line and len(parts) >= 2 and is_date_token(parts[0]):
            if (date := _row_date(parts[0], line)) is None:
                return None
            return TransactionData(
                date=date,
                description=description,
                amount=parse_ledger_number(parts[1]),
                units=0.0,
                nav=0.0,
                balance=0.0,
                type=txn_type,
            )

    if any(marker in line for marker in SKIP_MARKERS):
        logger.debug("Skipping non transaction row: %s", line)
        return None

    if len(parts) < 5 or not is_date_token(parts[0]):
        return None

    amount = parse_ledger_number(parts[1])
    nav = parse_ledger_number(parts[2]) or 0.0
    units = parse_ledger_number(parts[3])
    balance = parse_ledger_number(parts[-1])
    description = " ".join(parts[4:-1])
    if not description:
        return None
    # Consolidation and footer rows carry text but no values
    if not any((amount, units, nav, balance)):
        logger.debug("Skipping row without values: %s", line)
        return None

    if (date := _row_date(parts[0], line)) is None:
        return None

    return TransactionData(
        date=date,
        description=description,
        amount=amount,
        units=units,
        nav=nav,
        balance=balance,
        type=get_transaction_type(description, units),
    )
