from castext import patterns
from castext.parser import parse_investor_info
from castext.summary.processor import SummaryProcessor
from castext.summary.types import SummaryCASData
from castext.types import StatementPeriod
from castext.utils import get_statement_dates


def parse_summary_text(text: str) -> SummaryCASData:
    """
    Parse the text of a summary CAS and return the current holdings.

    Parameters
    ----------
    text : str
        Page-oriented text of the statement, one line per row.
    """
    statement_period = StatementPeriod()
    if dates := get_statement_dates(text, patterns.SUMMARY_DATE):
        (statement_period.to,) = dates

    holdings, current_value, cost = SummaryProcessor().process_summary_version(text)
    return SummaryCASData(
        statement_period=statement_period,
        investor_info=parse_investor_info(text),
        current_value=current_value,
        cost=cost,
        folios=holdings,
    )
