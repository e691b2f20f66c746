import logging
import re

from castext import patterns
from castext.amc import extract_amc
from castext.constants import FOLIO_PREFIX, HOLDER_NAME_LENGTH
from castext.detailed.helpers import extract_scheme_info, parse_transaction_line
from castext.detailed.types import Folio, Scheme, SchemeInfo
from castext.enums import ParserState, SchemeInfoStatus
from castext.utils import LineCursor, formatINR, is_date_token, try_convert_date

logger = logging.getLogger(__name__)


class DetailedProcessor:
    __slots__ = ()

    @staticmethod
    def is_pan_line(line: str) -> bool:
        return "PAN:" in line and re.search(patterns.PAN_LINE, line) is not None

    @staticmethod
    def extract_pan_kyc(line: str) -> tuple[str | None, str | None, str | None]:
        """
        Extract PAN, KYC status and PAN verification status from the line.

        Supported line formats
        ----------------------
        - "PAN: ABCDE1234F KYC: OK PAN: OK"
        - "PAN: ABCDE1234F KYC: NOT OK PAN: NOT OK"
        """
        pan_match = re.search(patterns.PAN, line)
        kyc_match = re.search(patterns.KYC, line)
        pankyc_match = re.search(patterns.PAN_KYC, line)
        return (
            pan_match.group(1) if pan_match else None,
            re.sub(r"\s+", " ", kyc_match.group(1)) if kyc_match else None,
            re.sub(r"\s+", " ", pankyc_match.group(1)) if pankyc_match else None,
        )

    @classmethod
    def read_scheme_info(cls, cursor: LineCursor) -> SchemeInfo | None:
        """
        Read the scheme header following a PAN line.

        Wrapped headers are joined with the following lines until the ISIN is complete.
        A blank line, a folio line or another PAN line ends the attempt.
        """
        candidate = next(cursor, None)
        if candidate is None:
            return None
        status, info = extract_scheme_info(candidate)
        while status is SchemeInfoStatus.INCOMPLETE:
            next_line = cursor.peek()
            if not next_line or next_line.startswith(FOLIO_PREFIX) or cls.is_pan_line(next_line):
                break
            cursor.advance()
            candidate = f"{candidate} {next_line}"
            status, info = extract_scheme_info(candidate)
        return info

    @staticmethod
    def is_holder_name(line: str) -> bool:
        min_length, max_length = HOLDER_NAME_LENGTH
        return re.match(r"[A-Z]", line) is not None and min_length < len(line) < max_length

    @staticmethod
    def extract_nominees(line: str) -> list[str]:
        """
        Extract nominee names from the line if present.

        Supported line formats
        ----------------------
        - "Nominee 1: Joe Doe Nominee 2: Jane Doe Nominee 3: John Doe"
        """
        nominee_match = re.findall(patterns.NOMINEE, line)
        return [nominee.strip() for nominee in nominee_match if nominee.strip()]

    @staticmethod
    def extract_open_units(line: str) -> float | None:
        """
        Extract opening unit balance from the line if present.

        Supported line formats
        ----------------------
        - "Opening Unit Balance: 50.166"
        """
        if open_units_match := re.search(patterns.OPEN_UNITS, line):
            return formatINR(open_units_match.group(1))
        return None

    @staticmethod
    def extract_scheme_valuation(line: str, current_scheme: Scheme) -> Scheme:
        """
        Extract and update scheme valuation details from the line if present.

        Supported line formats
        ----------------------
        - "Closing Unit Balance: 50.166 NAV on 20-Sep-2024: INR 112.1222 Total Cost Value: 5,000.00
          Market Value on 20-Sep-2024: INR 5,624.71"

        - "NAV on 20-Sep-2024: INR 112.1222"
        """
        if close_units_match := re.search(patterns.CLOSE_UNITS, line):
            current_scheme.close = formatINR(close_units_match.group(1))

        if cost_match := re.search(patterns.COST, line):
            current_scheme.valuation.cost = formatINR(cost_match.group(1))

        if nav_match := re.search(patterns.NAV, line):
            current_scheme.valuation.date = try_convert_date(nav_match.group(1))
            current_scheme.valuation.nav = formatINR(nav_match.group(2))

        if valuation_match := re.search(patterns.VALUATION, line):
            current_scheme.valuation.value = formatINR(valuation_match.group(1))

        return current_scheme

    @staticmethod
    def is_transaction_row(line: str) -> bool:
        # Cheap positional check before the date regex
        return len(line) >= 11 and line[2] == "-" and line[6] == "-" and is_date_token(line[:11])

    def process_detailed_version(self, text: str) -> list[Folio]:
        """Walk the statement lines and build folios with their schemes and transactions."""

        def transition(new_state: ParserState, *expected: ParserState):
            """Move to ``new_state``, logging the move when it comes from an unexpected state."""
            nonlocal state
            if expected and state not in expected:
                logger.debug("Out of order line, moving from %s to %s", state, new_state)
            state = new_state

        folios: list[Folio] = []
        known_folios: dict[tuple[str, str | None], Folio] = {}
        state = ParserState.IDLE
        current_amc: str | None = None
        current_scheme: Scheme | None = None
        current_folio: Folio | None = None
        # PAN details are read before the folio they belong to
        pending_pan: tuple[str | None, str | None, str | None] = (None, None, None)

        cursor = LineCursor(text.split("\n"))
        for line in cursor:
            if not line:
                continue

            if amc := extract_amc(line):
                current_amc = amc
                continue

            if self.is_pan_line(line):
                pending_pan = self.extract_pan_kyc(line)
                current_folio = None
                if (scheme_info := self.read_scheme_info(cursor)) is None:
                    logger.debug("Unable to parse scheme details after line: %s", line)
                    current_scheme = None
                    transition(ParserState.IDLE)
                    continue
                if current_scheme is not None:
                    logger.debug("Dropping scheme without closing balance: %s", current_scheme.scheme_name)
                current_scheme = Scheme(
                    scheme_name=scheme_info.scheme_name,
                    isin=scheme_info.isin,
                    advisor=scheme_info.advisor,
                    rta_code=scheme_info.rta_code,
                    rta=scheme_info.rta,
                )
                transition(ParserState.FOLIO_EXPECTED, ParserState.IDLE, ParserState.CLOSED)
                continue

            if line.startswith(FOLIO_PREFIX):
                if state is not ParserState.FOLIO_EXPECTED:
                    logger.debug("Ignoring folio line outside a scheme header: %s", line)
                    continue
                folio_number = line[len(FOLIO_PREFIX) :].strip()
                key = (folio_number, current_amc)
                if (current_folio := known_folios.get(key)) is None:
                    pan, kyc, pankyc = pending_pan
                    current_folio = Folio(folio=folio_number, amc=current_amc, pan=pan, kyc=kyc, pankyc=pankyc)
                    known_folios[key] = current_folio
                    folios.append(current_folio)
                transition(ParserState.NAME_EXPECTED)
                continue

            if state is ParserState.NAME_EXPECTED and self.is_holder_name(line):
                # Holder name is not part of the output
                transition(ParserState.NOMINEE_EXPECTED)
                continue

            if state is ParserState.NOMINEE_EXPECTED and "Nominee" in line:
                current_scheme.nominees = self.extract_nominees(line)
                transition(ParserState.NOMINEES_READ)
                continue

            if current_scheme is None:
                continue

            if "Opening Unit Balance:" in line:
                if (open_units := self.extract_open_units(line)) is not None:
                    current_scheme.open = current_scheme.close_calculated = open_units
                    transition(
                        ParserState.COLLECTING_TRANSACTIONS,
                        ParserState.NOMINEE_EXPECTED,
                        ParserState.NOMINEES_READ,
                    )
                continue

            if "Closing Unit Balance:" in line:
                self.extract_scheme_valuation(line, current_scheme)
                if current_folio is not None:
                    current_folio.schemes.append(current_scheme)
                else:
                    logger.warning("Dropping scheme without folio: %s", current_scheme.scheme_name)
                current_scheme = current_folio = None
                transition(ParserState.CLOSED, ParserState.COLLECTING_TRANSACTIONS)
                continue

            if "NAV on" in line:
                self.extract_scheme_valuation(line, current_scheme)
                continue

            if state is ParserState.COLLECTING_TRANSACTIONS and self.is_transaction_row(line):
                if txn := parse_transaction_line(line):
                    current_scheme.transactions.append(txn)
                    if txn.units is not None:
                        current_scheme.close_calculated += txn.units

        return folios
