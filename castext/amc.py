import re
from typing import NamedTuple

from rapidfuzz.distance import Levenshtein

from castext.constants import AMC_CATALOG, AMC_MATCH_THRESHOLD, UNKNOWN_AMC


class AMCMatch(NamedTuple):
    """Best catalog entry for a name along with its similarity score."""

    name: str
    score: float


def normalize_name(name: str) -> str:
    """Lower-case and collapse runs of non-alphanumeric characters to single spaces."""
    return re.sub(r"[^a-z0-9]+", " ", name.lower()).strip()


def _first_token(name: str) -> str:
    tokens = normalize_name(name).split(" ", 1)
    return tokens[0]


_CATALOG_KEYS = tuple((amc, _first_token(amc)) for amc in AMC_CATALOG)
_CATALOG_PREFIXES = tuple((amc.lower(), amc) for amc in AMC_CATALOG)


def match_amc(scheme_name: str) -> AMCMatch:
    """
    Find the catalog AMC whose first word is closest to the first word of ``scheme_name``.

    Similarity is ``1 - edit_distance / max(len_a, len_b)``. The first catalog entry
    reaching the best score wins.
    """
    key = _first_token(scheme_name)
    best = AMCMatch(UNKNOWN_AMC, 0.0)
    for amc, amc_key in _CATALOG_KEYS:
        score = Levenshtein.normalized_similarity(key, amc_key)
        if score > best.score:
            best = AMCMatch(amc, score)
    return best


def resolve_amc(scheme_name: str) -> str:
    """
    Resolve the fund house of a scheme from its free-text name.

    Supported name formats
    ----------------------
    - "HDFC Mutual Fund Large Cap" -> "HDFC Mutual Fund"
    - "Axis Bluechip Fund - Regular Growth" -> "Axis Mutual Fund"
    """
    best = match_amc(scheme_name)
    return best.name if best.score > AMC_MATCH_THRESHOLD else UNKNOWN_AMC


def extract_amc(line: str) -> str | None:
    """
    Return the catalog AMC the line starts with (case-insensitive), if any.

    Supported line formats
    ----------------------
    - "HDFC Mutual Fund"
    - "Franklin Templeton Mutual Fund"
    """
    line_lower = line.lower()
    for prefix, amc in _CATALOG_PREFIXES:
        if line_lower.startswith(prefix):
            return amc
    return None
