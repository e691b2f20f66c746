from castext import patterns
from castext.detailed.processor import DetailedProcessor
from castext.detailed.types import DetailedCASData
from castext.parser import parse_investor_info
from castext.types import StatementPeriod
from castext.utils import get_statement_dates


def parse_detailed_text(text: str) -> DetailedCASData:
    """
    Parse the text of a detailed CAS and return folios with full transaction history.

    Parameters
    ----------
    text : str
        Page-oriented text of the statement, one line per row.
    """
    statement_period = StatementPeriod()
    if dates := get_statement_dates(text, patterns.DETAILED_DATE):
        statement_period.from_, statement_period.to = dates

    return DetailedCASData(
        statement_period=statement_period,
        investor_info=parse_investor_info(text),
        folios=DetailedProcessor().process_detailed_version(text),
    )
