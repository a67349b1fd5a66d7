# reading_import/application/processing/matching/_fuzzy_scorer.py

"""Fuzzy title/author tier of the matcher"""

# Standard library imports
from logging import getLogger
from typing import NamedTuple

# Local imports
from reading_import.application.processing.library_cache import LibraryCache
from reading_import.application.processing.library_cache import NormalizedRecord
from reading_import.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import MatchReason
from reading_import.infrastructure.config import MatchingThresholds

logger = getLogger(__name__)


class CandidateScore(NamedTuple):
    """Score of one catalog entry against a record"""

    entry: CatalogEntry
    score: float
    reason: MatchReason


class FuzzyScorer:
    """Scores every catalog entry and keeps the single best candidate

    Rules are evaluated in order per entry and the first one that fires
    decides that entry's score:

    1. title >= exact_title and primary author >= exact_primary_author -> exact_score
    2. title >= high_title and author set >= high_author -> high_score
    3. title >= medium_title -> title x 100
    4. title >= relaxed_title -> title x 100
    5. import title (min length) is a substring of the entry title and
       author set >= substring_author -> substring_score
    """

    __slots__ = ("similarity_calculator", "thresholds")

    def __init__(self, similarity_calculator: SimilarityCalculator, thresholds: MatchingThresholds):
        self.similarity_calculator = similarity_calculator
        self.thresholds = thresholds

    def score_entry(
        self, normalized: NormalizedRecord, entry: CatalogEntry, cache: LibraryCache
    ) -> CandidateScore | None:
        """Score one catalog entry, None when no rule fires"""
        calc = self.similarity_calculator
        t = self.thresholds

        entry_title = cache.normalized_titles[entry.id]
        entry_authors = cache.normalized_authors[entry.id]

        title_score = calc.title_similarity_normalized(
            normalized.title, normalized.main_title, entry_title, cache.main_titles[entry.id]
        )

        if title_score >= t.exact_title:
            primary_score = calc.primary_author_similarity_normalized(
                normalized.authors, entry_authors
            )
            if primary_score >= t.exact_primary_author:
                return CandidateScore(entry, t.exact_score, MatchReason.TITLE_AUTHOR_EXACT)

        if title_score >= t.high_title:
            author_score = calc.author_similarity_normalized(normalized.authors, entry_authors)
            if author_score >= t.high_author:
                return CandidateScore(entry, t.high_score, MatchReason.TITLE_AUTHOR_HIGH)

        if title_score >= t.medium_title:
            return CandidateScore(entry, title_score * 100, MatchReason.TITLE_AUTHOR_MEDIUM)

        if title_score >= t.relaxed_title:
            return CandidateScore(entry, title_score * 100, MatchReason.TITLE_FUZZY_RELAXED)

        if len(normalized.title) >= t.substring_min_length and normalized.title in entry_title:
            author_score = calc.author_similarity_normalized(normalized.authors, entry_authors)
            if author_score >= t.substring_author:
                return CandidateScore(entry, t.substring_score, MatchReason.SUBSTRING_TITLE_MATCH)

        return None

    def best_candidate(
        self, normalized: NormalizedRecord, cache: LibraryCache
    ) -> CandidateScore | None:
        """Highest scoring entry across the whole catalog

        Only a strictly greater score replaces the current best, so the
        first entry in cache order (lowest id) wins ties.
        """
        best: CandidateScore | None = None

        for entry in cache.entries:
            candidate = self.score_entry(normalized, entry, cache)
            if candidate is None or candidate.score <= 0:
                continue
            if best is None or candidate.score > best.score:
                best = candidate

        return best
