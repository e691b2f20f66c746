from enum import StrEnum, auto


class CustomStrEnum(StrEnum):
    """Custom string enum that auto-generates values in uppercase."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        """
        Return the upper-cased version of the member name.
        """
        return name.upper()


class FileType(CustomStrEnum):
    """Enum for CAS file source."""

    CAMS = auto()


class CASType(CustomStrEnum):
    """Enum for CAS statement variant"""

    SUMMARY = auto()
    DETAILED = auto()


class TransactionType(CustomStrEnum):
    """Enum for different types of transactions."""

    PURCHASE = auto()
    REDEMPTION = auto()
    SWITCH_IN = auto()
    SWITCH_OUT = auto()
    DIVIDEND = auto()
    STAMP_DUTY_TAX = auto()
    STT_TAX = auto()
    DEMAT = auto()
    CONSOLIDATION = auto()
    CANCELLED = auto()
    OTHER = auto()


class ParserState(CustomStrEnum):
    """States of the detailed statement line parser."""

    IDLE = auto()
    # Scheme header read, waiting for its folio line
    FOLIO_EXPECTED = auto()
    NAME_EXPECTED = auto()
    NOMINEE_EXPECTED = auto()
    NOMINEES_READ = auto()
    COLLECTING_TRANSACTIONS = auto()
    CLOSED = auto()


class SchemeInfoStatus(CustomStrEnum):
    """Outcome of a scheme header extraction attempt."""

    OK = auto()
    # ISIN missing or shorter than 12 characters, more input may complete it
    INCOMPLETE = auto()
    INVALID = auto()
