# reading_import/shared/utils/date_utils.py

"""Flexible date parsing for reading-history exports

Accepted forms:
- 2024-01-15 (ISO, optionally followed by a time part)
- 2024/01/15, 15/01/2024, 01/15/2024 (day-first is tried before month-first)
- 15-01-2024, 01-15-2024
- Jan 15, 2024 / January 15 2024 / 15 Jan 2024
- 2024 (January 1st)
"""

# Standard library imports
from collections.abc import Callable
from datetime import date
from re import IGNORECASE
from re import compile as re_compile

MIN_YEAR = 1000
MAX_YEAR = 9999

MONTH_NAMES = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

# Order matters: the bare hyphen must come first so YYYY/MM/DD-YYYY/MM/DD splits cleanly
RANGE_SEPARATORS = ("-", " to ", " - ", "–", "—")

_ISO_PATTERN = re_compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ][\d:.]+(?:Z|[+-]\d{2}:?\d{2})?)?$")
_SLASH_PATTERN = re_compile(r"^(\d{1,4})/(\d{1,2})/(\d{1,4})$")
_DASH_PATTERN = re_compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")
_MONTH_FIRST_PATTERN = re_compile(r"^([a-z]+)\.?\s+(\d{1,2}),?\s+(\d{4})$", IGNORECASE)
_DAY_FIRST_PATTERN = re_compile(r"^(\d{1,2})\s+([a-z]+)\.?,?\s+(\d{4})$", IGNORECASE)
_YEAR_PATTERN = re_compile(r"^(\d{4})$")


def _build_date(year: int, month: int, day: int) -> date | None:
    """Construct a date, None for impossible dates or years out of range"""
    if year < MIN_YEAR or year > MAX_YEAR:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _parse_iso(text: str) -> date | None:
    match = _ISO_PATTERN.match(text)
    if not match:
        return None
    return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def _parse_slash(text: str) -> date | None:
    match = _SLASH_PATTERN.match(text)
    if not match:
        return None

    first, second, third = (int(part) for part in match.groups())

    if first > 31:
        # YYYY/MM/DD
        return _build_date(first, second, third)

    if third > 31:
        # DD/MM/YYYY, then MM/DD/YYYY
        return _build_date(third, second, first) or _build_date(third, first, second)

    return None


def _parse_dash(text: str) -> date | None:
    match = _DASH_PATTERN.match(text)
    if not match:
        return None

    first, second, year = (int(part) for part in match.groups())
    return _build_date(year, second, first) or _build_date(year, first, second)


def _parse_month_name(text: str) -> date | None:
    match = _MONTH_FIRST_PATTERN.match(text)
    if match:
        month = MONTH_NAMES.get(match.group(1).lower())
        if month is not None:
            return _build_date(int(match.group(3)), month, int(match.group(2)))

    match = _DAY_FIRST_PATTERN.match(text)
    if match:
        month = MONTH_NAMES.get(match.group(2).lower())
        if month is not None:
            return _build_date(int(match.group(3)), month, int(match.group(1)))

    return None


def _parse_year_only(text: str) -> date | None:
    match = _YEAR_PATTERN.match(text)
    if not match:
        return None
    return _build_date(int(match.group(1)), 1, 1)


_PARSERS: tuple[Callable[[str], date | None], ...] = (
    _parse_iso,
    _parse_slash,
    _parse_dash,
    _parse_month_name,
    _parse_year_only,
)


def parse_date(value: str | None) -> date | None:
    """Parse a single date in any supported export format

    Args:
        value: Raw date text

    Returns:
        Parsed date, or None if empty or unparseable

    Examples:
        >>> parse_date("2024/03/02")
        datetime.date(2024, 3, 2)
        >>> parse_date("Sept 5, 2023")
        datetime.date(2023, 9, 5)
        >>> parse_date("2024/02/30") is None
        True
    """
    if not value:
        return None

    text = value.strip()
    if not text:
        return None

    for parser in _PARSERS:
        parsed = parser(text)
        if parsed is not None:
            return parsed
    return None


def parse_date_range(value: str | None) -> tuple[date, date] | None:
    """Parse a compound start/end date field

    Each separator is tried in turn; a split must produce exactly two parts,
    both must parse, and the start may not be after the end.

    Examples:
        >>> parse_date_range("2024/01/17-2024/01/19")
        (datetime.date(2024, 1, 17), datetime.date(2024, 1, 19))
        >>> parse_date_range("2024-01-17 to 2024-01-19")
        (datetime.date(2024, 1, 17), datetime.date(2024, 1, 19))
    """
    if not value:
        return None

    text = value.strip()
    if not text:
        return None

    for separator in RANGE_SEPARATORS:
        parts = text.split(separator)
        if len(parts) != 2:
            continue

        start = parse_date(parts[0])
        end = parse_date(parts[1])
        if start is not None and end is not None and start <= end:
            return start, end

    return None


def format_date(value: date | None) -> str | None:
    """ISO 8601 form of a date, None passes through"""
    return value.isoformat() if value is not None else None
