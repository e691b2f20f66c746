import logging
import re
from collections.abc import Iterable, Iterator

from dateutil import parser as date_parser

from castext import patterns
from castext.flags import MULTI_TEXT_FLAGS

logger = logging.getLogger(__name__)


def is_date_token(token: str) -> bool:
    """Check that a token has the exact ``DD-Mon-YYYY`` shape."""
    return re.fullmatch(patterns.DATE_TOKEN, token) is not None


def convert_date(token: str) -> str:
    """
    Convert a ``DD-Mon-YYYY`` token to ``YYYY-MM-DD``.

    The token shape is not re-validated here, callers check it with
    :func:`is_date_token` first. An unknown month or a day that does not
    exist in the month (e.g. ``31-Feb-2024``) raises ``ValueError``.
    """
    return date_parser.parse(token, dayfirst=True).date().isoformat()


def try_convert_date(token: str) -> str | None:
    """Variant of :func:`convert_date` returning None for dates that do not exist."""
    try:
        return convert_date(token)
    except ValueError:
        logger.debug("Ignoring invalid date: %s", token)
        return None


def get_statement_dates(text: str, reg_exp: str) -> tuple[str, ...] | None:
    """
    Helper to get dates for which the statement is applicable.
    """
    if m := re.search(reg_exp, text, MULTI_TEXT_FLAGS):
        dates = tuple(try_convert_date(date) for date in m.groups())
        if None not in dates:
            return dates
    return None


def formatINR(value: str | None) -> float | None:
    """Helper to format amount related strings to float. Parenthesised values are negative."""
    if isinstance(value, str):
        return float(value.replace(",", "").replace("(", "-").replace(")", ""))
    return None


def parse_ledger_number(token: str) -> float | None:
    """Lenient variant of :func:`formatINR` for ledger columns, returns None for non-numeric tokens."""
    if re.match(patterns.LEDGER_NUMBER, token):
        return formatINR(token)
    return None


class LineCursor:
    """
    Peekable cursor over the lines of a document.

    Iterating yields stripped lines (blank lines included, as empty strings) so that
    callers can look ahead with :meth:`peek` and consume with :meth:`advance`
    without juggling an index.
    """

    __slots__ = ("_lines", "_pos")

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self._pos = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._lines):
            raise StopIteration
        line = self._lines[self._pos].strip()
        self._pos += 1
        return line

    def peek(self) -> str | None:
        if self._pos >= len(self._lines):
            return None
        return self._lines[self._pos].strip()

    def advance(self) -> None:
        self._pos += 1
