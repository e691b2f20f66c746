import logging
import re

from castext import patterns
from castext.amc import resolve_amc
from castext.exceptions import StructuralError
from castext.summary.types import SummaryHolding
from castext.utils import formatINR, try_convert_date

logger = logging.getLogger(__name__)


class SummaryProcessor:
    __slots__ = ()

    @staticmethod
    def find_section(lines: list[str]) -> tuple[int, int]:
        """Return indices of the holdings header line and of the "Total" line that follows it."""
        start = next((i for i, line in enumerate(lines) if patterns.SUMMARY_SECTION_START in line), None)
        if start is None:
            raise StructuralError("Could not find summary section start")
        end = next(
            (i for i in range(start + 1, len(lines)) if lines[i].startswith(patterns.SUMMARY_SECTION_END)),
            None,
        )
        if end is None:
            raise StructuralError("Could not find summary section end")
        return start, end

    @staticmethod
    def extract_totals(line: str) -> tuple[float, float]:
        """
        Extract total market value and cost from the line.

        Supported line formats
        ----------------------
        - "Total 5,000.00 4,500.00"
        """
        if total_match := re.search(patterns.SUMMARY_TOTAL, line):
            return formatINR(total_match.group(1)), formatINR(total_match.group(2))
        return 0.0, 0.0

    @staticmethod
    def extract_holding(scheme_line: str, value_line: str) -> SummaryHolding | None:
        """
        Extract a holding from its two lines.

        Supported line formats
        ----------------------
        - "12345678 5,000.00 B205RG - Axis Bluechip Fund - Regular Growth"
          "100.000 27-Oct-2024 50.0000 KFINTECH INF846K01164 4,500.00"
        """
        scheme_match = re.search(patterns.SUMMARY_SCHEME_ROW, scheme_line)
        if not scheme_match:
            return None
        value_match = re.search(patterns.SUMMARY_VALUE_ROW, value_line)
        if not value_match:
            return None

        if (nav_date := try_convert_date(value_match.group("date"))) is None:
            return None

        scheme_name = scheme_match.group("name").strip()
        return SummaryHolding(
            folio=scheme_match.group("folio"),
            current_value=formatINR(scheme_match.group("value")),
            cost=formatINR(value_match.group("cost")),
            rta_code=re.sub(r"\s+", "", scheme_match.group("code")),
            scheme_name=scheme_name,
            units=formatINR(value_match.group("units")),
            nav_date=nav_date,
            nav=formatINR(value_match.group("nav")),
            rta=value_match.group("rta"),
            isin=value_match.group("isin"),
            amc=resolve_amc(scheme_name),
        )

    def process_summary_version(self, text: str) -> tuple[list[SummaryHolding], float, float]:
        """Return the holdings of a summary statement along with total market value and cost."""
        lines = re.split(r"\r?\n", text)
        start, end = self.find_section(lines)
        current_value, cost = self.extract_totals(lines[end])
        section = [line.strip() for line in lines[start + 1 : end] if line.strip()]

        holdings: list[SummaryHolding] = []
        idx = 0
        while idx < len(section) - 1:
            # Holdings start with the folio number
            if section[idx][0].isdigit() and (holding := self.extract_holding(section[idx], section[idx + 1])):
                holdings.append(holding)
                idx += 2
                continue
            if section[idx][0].isdigit():
                logger.debug("Skipping unparseable holding line: %s", section[idx])
            idx += 1

        return holdings, current_value, cost
