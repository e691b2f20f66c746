from castext.constants import ADVISOR_PREFIXES

# Common

DATE_TOKEN = r"\d{2}-(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)-\d{4}"
DATE = rf"({DATE_TOKEN})"
AMT = r"([\d,]+(?:\.\d+)?)"

# Statement header
DETAILED_DATE = rf"{DATE}\s+To\s+{DATE}"
SUMMARY_DATE = rf"As\s+on\s+{DATE}"

# Investor Details
INVESTOR_MAIL = r"Email\s+Id:\s*([^\n]+)"
INVESTOR_MOBILE = r"Mobile:\s*(\+?\d+)"
INVESTOR_BLOCK = r"Email\s+Id:[^\n]*\n([\s\S]+?)Mobile:"

# Detailed Version
PAN_LINE = r"PAN:\s*[A-Z0-9]+"
PAN = r"PAN:\s*([A-Z]{5}\d{4}[A-Z])"
KYC = r"KYC:\s*(OK|NOT\s*OK)(?!\d)"
PAN_KYC = r"PAN:\s*(OK|NOT\s*OK)(?!\s*[A-Z]{5})"
NOMINEE = r"Nominee\s+\d+:\s*([A-Za-z][A-Za-z\s.]*?)(?=\s+Nominee\s+\d+:|\s*$)"
OPEN_UNITS = rf"Opening\s+Unit\s+Balance:\s*{AMT}"
CLOSE_UNITS = rf"Closing\s+Unit\s+Balance:\s*{AMT}"
COST = rf"Total\s+Cost\s+Value:\s*{AMT}"
NAV = rf"NAV\s+on\s+{DATE}:\s*INR\s*{AMT}"
VALUATION = rf"Market\s+Value\s+on\s+{DATE_TOKEN}:\s*INR\s*{AMT}"

# Scheme details
# ISIN may be split by a soft wrap, so spaces are allowed inside the candidate
ISIN = r"ISIN\s*:\s*([A-Z0-9\s]+?)(?=\s*\(|\s+Advisor|Registrar|$)"
ADVISOR = (
    rf"Advisor\s*:?\s*((?:{'|'.join(ADVISOR_PREFIXES)})[-A-Za-z0-9\s]*?|DIRECT)"
    r"(?=\s*\)|\s*\(|\s+Registrar|\s*$)"
)
REGISTRAR = r"Registrar\s*:\s*([A-Z]+)"
DEMAT_QUALIFIER = r"\s*\(\s*(?:Non\s*-\s*)?Demat\s*\)\s*"
FORMERLY = r"\s*\([^()]*?(?:formerly|erstwhile).*?\)"
TRAILING_DASH = r"\s*-\s*$"

# Summary Version
SUMMARY_SECTION_START = "Market Value Folio No."
SUMMARY_SECTION_END = "Total "
SUMMARY_TOTAL = r"^Total\s+([\d,]+\.\d+)\s+([\d,]+\.\d+)"
SUMMARY_SCHEME_ROW = r"^(?P<folio>\S+)\s+(?P<value>[\d,]+\.\d+)\s+(?P<code>[A-Z0-9\s]+?)\s+-\s+(?P<name>.+)$"
SUMMARY_VALUE_ROW = (
    rf"^(?P<units>[\d,]+\.\d+)\s+(?P<date>{DATE_TOKEN})\s+(?P<nav>[\d,]+(?:\.\d+)?)\s+"
    r"(?P<rta>\S+)\s+(?P<isin>\S+)\s+(?P<cost>[\d,]+\.\d+)$"
)

# Transaction details
LEDGER_NUMBER = r"^[(-]?(?:\d[\d,]*)?\.?\d+\)?$"
REDEMPTION_TXN = r"purchase[-\s]*reversed|systematic\s+investment\s+purchase[-\s]*reversed|redemption"
PURCHASE_TXN = r"purchase|systematic\s+investment"
