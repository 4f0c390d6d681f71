"""Street address parsing and street-name normalization.

"123 Main St." and "123 Main Street" must compare equal, so both the typed
address and every street name stored on a zone go through
``normalize_street_name`` before comparison.
"""

from __future__ import annotations

import re
from collections import namedtuple

ParsedAddress = namedtuple("ParsedAddress", ["number", "street"])

# full word -> abbreviation; both forms are dropped
STREET_SUFFIXES = {
    "street": "st",
    "avenue": "ave",
    "road": "rd",
    "drive": "dr",
    "lane": "ln",
    "circle": "cir",
    "court": "ct",
    "place": "pl",
    "boulevard": "blvd",
    "parkway": "pkwy",
    "terrace": "ter",
    "way": None,
}


def _suffix_pattern() -> re.Pattern:
    alternatives = []
    for word, abbrev in STREET_SUFFIXES.items():
        alternatives.append(rf"\b{word}\b")
        if abbrev:
            # abbreviations may carry a trailing period ("St.")
            alternatives.append(rf"\b{abbrev}\b\.?")
    return re.compile("|".join(alternatives), re.IGNORECASE)


_SUFFIX_RE = _suffix_pattern()
_LEADING_NUMBER_RE = re.compile(r"^(\d+)")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_street_name(street: str) -> str:
    """Lower-case, drop suffix words, collapse whitespace."""
    street = _SUFFIX_RE.sub("", street.lower())
    return _WHITESPACE_RE.sub(" ", street).strip()


def parse_address(address: str) -> ParsedAddress:
    """Split a raw address into (house number or None, normalized street)."""
    trimmed = address.strip()
    m = _LEADING_NUMBER_RE.match(trimmed)
    if m:
        return ParsedAddress(int(m.group(1)), normalize_street_name(trimmed[m.end():]))
    return ParsedAddress(None, normalize_street_name(trimmed))
