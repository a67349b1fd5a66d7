# reading_import/application/processing/matching/__init__.py

"""Matching module for associating import records with catalog entries"""

# Local imports
from reading_import.application.processing.matching._confidence import (
    MATCH_REASON_DESCRIPTIONS,
)
from reading_import.application.processing.matching._confidence import (
    classify_confidence,
)
from reading_import.application.processing.matching._confidence import describe_reason
from reading_import.application.processing.matching._fuzzy_scorer import CandidateScore
from reading_import.application.processing.matching._fuzzy_scorer import FuzzyScorer
from reading_import.application.processing.matching._isbn_matcher import IsbnLookup
from reading_import.application.processing.matching._isbn_matcher import IsbnMatcher
from reading_import.application.processing.matching._library_matcher import (
    LibraryMatcher,
)

__all__ = [
    "CandidateScore",
    "FuzzyScorer",
    "IsbnLookup",
    "IsbnMatcher",
    "LibraryMatcher",
    "MATCH_REASON_DESCRIPTIONS",
    "classify_confidence",
    "describe_reason",
]
