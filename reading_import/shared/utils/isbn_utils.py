# reading_import/shared/utils/isbn_utils.py

"""ISBN cleanup, validation and conversion utilities"""

# Standard library imports
from re import compile as re_compile
from re import sub

ISBN_CANDIDATE_PATTERN = re_compile(r"(?<![0-9Xx])\d[\d\- ]{8,15}[\dXx](?![0-9Xx])")


def strip_spreadsheet_wrapper(value: str | None) -> str:
    """Remove spreadsheet formula quoting from an exported identifier

    Some exports write identifiers as ="0134685997" so spreadsheet software
    keeps leading zeros.

    Examples:
        >>> strip_spreadsheet_wrapper('="0134685997"')
        '0134685997'
        >>> strip_spreadsheet_wrapper('=""')
        ''
    """
    if not value:
        return ""

    stripped = value.strip()
    if stripped.startswith("="):
        stripped = stripped[1:]
    return stripped.strip('"').strip()


def clean_isbn(value: str | None) -> str | None:
    """Reduce an ISBN-like string to its digits (and a trailing X)

    Args:
        value: Raw identifier text

    Returns:
        Uppercase 10 or 13 character candidate, or None for any other length
    """
    if not value:
        return None

    cleaned = sub(r"[^0-9X]", "", value.upper())
    if len(cleaned) not in (10, 13):
        return None
    return cleaned


def is_valid_isbn10(isbn: str) -> bool:
    """Validate an ISBN-10 check digit (weighted mod 11, X = 10 in last place)"""
    if len(isbn) != 10 or not isbn[:9].isdigit():
        return False
    if not (isbn[9].isdigit() or isbn[9] == "X"):
        return False

    total = 0
    for position, char in enumerate(isbn):
        digit = 10 if char == "X" else int(char)
        total += (10 - position) * digit
    return total % 11 == 0


def _isbn13_check_digit(first_twelve: str) -> int:
    """Check digit for the first twelve digits of an ISBN-13"""
    total = sum(
        int(char) * (1 if position % 2 == 0 else 3) for position, char in enumerate(first_twelve)
    )
    return (10 - total % 10) % 10


def is_valid_isbn13(isbn: str) -> bool:
    """Validate an ISBN-13 check digit (alternating 1/3 weights mod 10)"""
    if len(isbn) != 13 or not isbn.isdigit():
        return False
    return _isbn13_check_digit(isbn[:12]) == int(isbn[12])


def is_valid_isbn(isbn: str) -> bool:
    """True for a check-digit valid ISBN-10 or ISBN-13 string"""
    return is_valid_isbn10(isbn) or is_valid_isbn13(isbn)


def isbn10_to_isbn13(isbn10: str) -> str | None:
    """Convert a valid ISBN-10 into its 978-prefixed ISBN-13 form

    Examples:
        >>> isbn10_to_isbn13("0134685997")
        '9780134685991'
    """
    if not is_valid_isbn10(isbn10):
        return None

    first_twelve = "978" + isbn10[:9]
    return first_twelve + str(_isbn13_check_digit(first_twelve))


def normalize_isbn(value: str | None) -> str | None:
    """Normalize an ISBN-like string to canonical ISBN-13 digits

    Args:
        value: Raw identifier, possibly hyphenated or spreadsheet-wrapped

    Returns:
        Valid ISBN-13 string, or None if the value is not a valid ISBN-10/13

    Examples:
        >>> normalize_isbn("978-0-13-468599-1")
        '9780134685991'
        >>> normalize_isbn("0-13-468599-7")
        '9780134685991'
        >>> normalize_isbn("978-0-13-468599-2") is None
        True
    """
    cleaned = clean_isbn(strip_spreadsheet_wrapper(value))
    if cleaned is None:
        return None

    if len(cleaned) == 13:
        return cleaned if is_valid_isbn13(cleaned) else None
    return isbn10_to_isbn13(cleaned)


def isbn_equals(first: str | None, second: str | None) -> bool:
    """Whether two identifiers name the same work across 10/13 forms"""
    normalized_first = normalize_isbn(first)
    if normalized_first is None:
        return False
    return normalized_first == normalize_isbn(second)


def extract_isbns(text: str | None) -> list[str]:
    """Find every valid ISBN in free text

    Returns:
        Normalized ISBN-13 strings in order of first appearance, without duplicates
    """
    if not text:
        return []

    found: list[str] = []
    for candidate in ISBN_CANDIDATE_PATTERN.findall(text):
        normalized = normalize_isbn(candidate)
        if normalized and normalized not in found:
            found.append(normalized)
    return found
