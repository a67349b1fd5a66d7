# reading_import/core/domain/enums.py

"""Domain enumerations for the reading import engine"""

# Standard library imports
from enum import Enum


class Provider(Enum):
    """Supported reading-history export formats"""

    GOODREADS = "goodreads"
    STORYGRAPH = "storygraph"

    @property
    def display_name(self) -> str:
        """Human readable provider name used in error messages"""
        return PROVIDER_DISPLAY_NAMES[self]


PROVIDER_DISPLAY_NAMES = {Provider.GOODREADS: "Goodreads", Provider.STORYGRAPH: "TheStoryGraph"}


class ReadingStatus(Enum):
    """Canonical status of an imported record"""

    READ = "read"
    CURRENTLY_READING = "currently-reading"
    TO_READ = "to-read"
    DID_NOT_FINISH = "did-not-finish"  # Terminal, never produces a session
    PAUSED = "paused"


class SessionStatus(Enum):
    """Lifecycle statuses understood by the session collaborator"""

    TO_READ = "to-read"
    READING = "reading"
    READ = "read"


class MatchConfidence(Enum):
    """Confidence tier derived from a 0-100 match score"""

    EXACT = "exact"  # >= 95
    HIGH = "high"  # [80, 95)
    MEDIUM = "medium"  # [70, 80)
    LOW = "low"  # [60, 70)
    UNMATCHED = "unmatched"  # < 60 or no candidate


class MatchReason(Enum):
    """Which matching rule produced a result"""

    ISBN_MATCH = "isbn_match"
    TITLE_AUTHOR_EXACT = "title_author_exact"
    TITLE_AUTHOR_HIGH = "title_author_high"
    TITLE_AUTHOR_MEDIUM = "title_author_medium"
    TITLE_FUZZY_RELAXED = "title_fuzzy_relaxed"
    SUBSTRING_TITLE_MATCH = "substring_title_match"
    NO_MATCH = "no_match"


class UnmatchedReason(Enum):
    """Why a record could not be associated with a catalog entry"""

    NO_ISBN = "no_isbn"  # No identifier and no title match
    ISBN_NOT_FOUND = "isbn_not_found"  # Identifier present but unknown to the catalog
    NO_TITLE_MATCH = "no_title_match"


class ImportStatus(Enum):
    """Final outcome of an executed import"""

    SUCCESS = "success"
    PARTIAL = "partial"
