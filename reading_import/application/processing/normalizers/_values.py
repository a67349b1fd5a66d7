# reading_import/application/processing/normalizers/_values.py

"""Cell value parsing shared by the provider normalizers"""

# Standard library imports
from math import floor
from math import isfinite


class RowSkipped(Exception):
    """A row that is intentionally left out, which is not an error"""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def parse_int(value: str, minimum: int | None = None) -> int | None:
    """Parse an integer cell, None if empty, malformed or below minimum"""
    if not value:
        return None
    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    if minimum is not None and parsed < minimum:
        return None
    return parsed


def parse_rating(value: str, max_rating: int = 5) -> int | None:
    """Parse a star rating, rounding halves up

    0 means unrated. Out of range or malformed values are treated as unrated.
    """
    if not value:
        return None
    try:
        parsed = float(value.strip())
    except ValueError:
        return None
    if not isfinite(parsed):
        return None

    rating = floor(parsed + 0.5)
    if rating < 1 or rating > max_rating:
        return None
    return rating
