"""
attribute_extractor.py — Numeric attribute detection in listing text.

Each attribute kind has a short ordered list of regex alternatives.  The
first alternative that matches anywhere in the text wins and its first
captured integer becomes the value; later alternatives for that kind are
not tried.  Every kind is attempted on every call, except amperage, which
is skipped once amp-hours were found ("100 amp hours" must not also read
as 100 A).

Input text is expected to be normalized already (see normalize_text).
"""

import re
import logging
from typing import Dict, Optional, Tuple

from itemspec.models.spec_schema import ExtractedAttributes

logger = logging.getLogger("itemspec.extractor")


# ---------------------------------------------------------------------------
# Pattern table: kind → ordered alternatives
# ---------------------------------------------------------------------------

_ATTRIBUTE_PATTERNS: Dict[str, Tuple[re.Pattern, ...]] = {
    "amp_hours": (
        re.compile(r"(\d+)\s*ah\b"),                   # 200ah, 200 ah
        re.compile(r"(\d+)\s*amp[\s-]*hours?"),        # 200 amp hours
        re.compile(r"(\d+)\s*amp[\s-]*hrs?\b"),        # 200 amp-hr
    ),
    "diameter_inches": (
        re.compile(r"(\d+)\s*(?:inches|inch)\b"),      # 12 inch
        re.compile(r"(\d+)\s*in\b"),                   # 12 in
        re.compile(r'(\d+)\s*"'),                      # 12"
    ),
    "wattage": (
        re.compile(r"(\d+)\s*watts?\b"),               # 100 watt
        re.compile(r"(\d+)\s*w\b"),                    # 100w
    ),
    "gallons": (
        re.compile(r"(\d+)\s*gallons?\b"),
        re.compile(r"(\d+)\s*gal\b"),
    ),
    "feet": (
        re.compile(r"(\d+)\s*(?:ft|feet|foot)\b"),     # 50ft, 50 foot
        re.compile(r"(\d+)\s*'"),                      # 50'
    ),
    "gph": (
        re.compile(r"(\d+)\s*gph\b"),
        re.compile(r"(\d+)\s*gallons?\s*per\s*hour"),
        re.compile(r"(\d+)\s*gal/h"),
    ),
    "amperage": (
        re.compile(r"(\d+)\s*amps?\b"),                # 20 amp
        re.compile(r"(\d+)\s*a\b"),                    # 20a
    ),
    "cubic_feet": (
        re.compile(r"(\d+)\s*cu\.?\s*ft"),             # 3cuft, 3 cu. ft
        re.compile(r"(\d+)\s*cubic\s*f(?:ee|oo)t"),
    ),
    "person_capacity": (
        re.compile(r"(\d+)[\s-]*(?:persons?|people|man|pax)\b"),   # 4-person
    ),
    "pounds": (
        re.compile(r"(\d+)\s*(?:lbs?|pounds?)\b"),
    ),
}

# Declaration order of ExtractedAttributes; amp_hours must precede amperage.
ATTRIBUTE_KINDS: Tuple[str, ...] = tuple(_ATTRIBUTE_PATTERNS)


def normalize_text(title: Optional[str], description: Optional[str]) -> str:
    """Lower-cased "<title> <description>" — the only form the engine scans."""
    return f"{title or ''} {description or ''}".lower()


def _first_match(text: str, patterns: Tuple[re.Pattern, ...]) -> Optional[int]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return None


def extract_attributes(text: str) -> ExtractedAttributes:
    """
    Scan normalized text for every attribute kind.

    Returns a sparse ExtractedAttributes; kinds with no matching pattern
    stay None.  Never raises — empty text yields an empty record.
    """
    found: Dict[str, int] = {}
    if not text:
        return ExtractedAttributes()

    for kind, patterns in _ATTRIBUTE_PATTERNS.items():
        if kind == "amperage" and "amp_hours" in found:
            continue
        value = _first_match(text, patterns)
        if value is not None:
            found[kind] = value

    if found:
        logger.debug("attributes extracted", extra={"attributes": found})
    return ExtractedAttributes(**found)
