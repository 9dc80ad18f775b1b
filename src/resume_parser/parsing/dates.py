"""Date-range normalization for experience and education entries.

Both functions are pure: no logging, no state, no exceptions for any
string input. An empty result means "unknown", never "error".
"""

import re

from .models import DateRange

PRESENT = "Present"

MONTHS = {
    "jan": "01", "january": "01",
    "feb": "02", "february": "02",
    "mar": "03", "march": "03",
    "apr": "04", "april": "04",
    "may": "05",
    "jun": "06", "june": "06",
    "jul": "07", "july": "07",
    "aug": "08", "august": "08",
    "sep": "09", "sept": "09", "september": "09",
    "oct": "10", "october": "10",
    "nov": "11", "november": "11",
    "dec": "12", "december": "12",
}

# Tried in order; the first separator present wins. A plain hyphen also
# splits single tokens such as "Mar-Apr 2021".
RANGE_SEPARATORS: tuple[re.Pattern[str], ...] = (
    re.compile("—"),
    re.compile("–"),
    re.compile("-"),
    re.compile(r"\s+to\s+", re.IGNORECASE),
)

_PRESENT = re.compile(r"\b(?:present|current|now)\b", re.IGNORECASE)
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_MONTH_YEAR = re.compile(r"([a-zA-Z]+)\.?,?\s+(\d{4})")
_YEAR = re.compile(r"\d{4}")
_MONTH_SLASH_YEAR = re.compile(r"(\d{1,2})/(\d{4})")


def normalize_date(date_str: str) -> str:
    """Normalize one date to ``YYYY-MM-DD``, ``"Present"`` or ``""``.

    Examples:
        >>> normalize_date("Aug 2024")
        '2024-08-01'
        >>> normalize_date("2024")
        '2024-01-01'
        >>> normalize_date("Present")
        'Present'
        >>> normalize_date("gibberish")
        ''
    """
    text = (date_str or "").strip()
    if not text:
        return ""

    if _PRESENT.search(text):
        return PRESENT

    if _ISO_DATE.fullmatch(text):
        return text

    match = _MONTH_YEAR.fullmatch(text)
    if match:
        month = MONTHS.get(match.group(1).lower())
        if month:
            return f"{match.group(2)}-{month}-01"

    if _YEAR.fullmatch(text):
        return f"{text}-01-01"

    match = _MONTH_SLASH_YEAR.fullmatch(text)
    if match and 1 <= int(match.group(1)) <= 12:
        return f"{match.group(2)}-{int(match.group(1)):02d}-01"

    return ""


def parse_date_range(date_str: str) -> DateRange:
    """Split a raw range such as ``"Jan 2023 - Present"`` and normalize both ends.

    The string is split on every occurrence of the first separator found
    and the first two parts become the start and end. Without a separator
    the whole string is the start date.
    """
    text = (date_str or "").strip()
    if not text:
        return DateRange()

    for separator in RANGE_SEPARATORS:
        if separator.search(text):
            parts = [p.strip() for p in separator.split(text)]
            start = normalize_date(parts[0])
            end = normalize_date(parts[1]) if len(parts) > 1 else ""
            return DateRange(start_date=start, end_date=end)

    return DateRange(start_date=normalize_date(text))
