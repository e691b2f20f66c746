# Fund houses in catalog order; lookups that can match several entries pick the first one.
AMC_CATALOG = (
    "360 ONE Mutual Fund",
    "Aditya Birla Sun Life Mutual Fund",
    "Axis Mutual Fund",
    "Bajaj Finserv Mutual Fund",
    "Bandhan Mutual Fund",
    "Bank of India Mutual Fund",
    "Baroda BNP Paribas Mutual Fund",
    "Canara Robeco Mutual Fund",
    "Capitalmind Mutual Fund",
    "Choice Mutual Fund",
    "CRB Mutual Fund",
    "DSP Mutual Fund",
    "Edelweiss Mutual Fund",
    "Franklin Templeton Mutual Fund",
    "Groww Mutual Fund",
    "Helios Mutual Fund",
    "HDFC Mutual Fund",
    "HSBC Mutual Fund",
    "ICICI Prudential Mutual Fund",
    "IDBI Mutual Fund",
    "Invesco Mutual Fund",
    "ITI Mutual Fund",
    "JM Financial Mutual Fund",
    "JioBlackRock Mutual Fund",
    "JPMorgan Mutual Fund",
    "Kotak Mahindra Mutual Fund",
    "L&T Mutual Fund",
    "LIC Mutual Fund",
    "Mahindra Manulife Mutual Fund",
    "Mirae Asset Mutual Fund",
    "Motilal Oswal Mutual Fund",
    "Navi Mutual Fund",
    "Nippon India Mutual Fund",
    "Old Bridge Mutual Fund",
    "PGIM India Mutual Fund",
    "PineBridge Mutual Fund",
    "PPFAS Mutual Fund",
    "Principal Mutual Fund",
    "Quant MF",
    "Quantum Mutual Fund",
    "Samco Mutual Fund",
    "SBI Mutual Fund",
    "Shriram Mutual Fund",
    "Sundaram Mutual Fund",
    "Tata Mutual Fund",
    "Taurus Mutual Fund",
    "TRUST Mutual Fund",
    "Union Mutual Fund",
    "UTI Mutual Fund",
    "WhiteOak Capital Mutual Fund",
    "Zerodha Mutual Fund",
    "Angel One Mutual Fund",
)

UNKNOWN_AMC = "Unknown AMC"
AMC_MATCH_THRESHOLD = 0.6

ISIN_LENGTH = 12
ADVISOR_PREFIXES = ("INZ", "INA", "CAT")

STAMP_DUTY_MARKER = "*** Stamp Duty ***"
STT_MARKER = "*** STT Paid ***"
# Ledger rows carrying these markers are not transactions
SKIP_MARKERS = ("***", "Unpledge", "Lien Removal", "Pledged", "Lien Marked")

FOLIO_PREFIX = "Folio No:"
HOLDER_NAME_LENGTH = (2, 100)
