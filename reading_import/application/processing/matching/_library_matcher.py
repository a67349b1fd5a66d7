# reading_import/application/processing/matching/_library_matcher.py

"""Tiered matcher associating import records with catalog entries"""

# Standard library imports
from logging import getLogger
from math import floor
from time import time

# Local imports
from reading_import.application.models.match_summary import MatchSummary
from reading_import.application.processing.library_cache import LibraryCache
from reading_import.application.processing.library_cache import NormalizedRecord
from reading_import.application.processing.matching._confidence import (
    classify_confidence,
)
from reading_import.application.processing.matching._fuzzy_scorer import FuzzyScorer
from reading_import.application.processing.matching._isbn_matcher import IsbnMatcher
from reading_import.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import MatchReason
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.core.domain.import_record import ImportRecord
from reading_import.core.domain.match_result import MatchResult
from reading_import.core.types.protocols import CatalogReader
from reading_import.infrastructure.config import ConfigLoader
from reading_import.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class LibraryMatcher(ConfigurableMixin):
    """Matches a batch of import records against a catalog snapshot

    Tier 1 is an identifier lookup accepted at a fixed exact/100 score when
    the titles agree. Tier 2 is a fuzzy scan over every catalog entry. Scoring
    touches no storage; the catalog is read once to build the cache.
    """

    def __init__(
        self,
        catalog: CatalogReader,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ):
        """Initialize matcher with components

        Args:
            catalog: Catalog read interface
            config: Configuration loader
            similarity_calculator: Similarity calculator
        """
        self.config = self._init_config(config)
        self.catalog = catalog
        self.thresholds = self.config.matching
        self.boundaries = self.config.confidence

        self.similarity_calculator = similarity_calculator or SimilarityCalculator(self.config)
        self.isbn_matcher = IsbnMatcher(self.similarity_calculator, self.thresholds.isbn_title_min)
        self.fuzzy_scorer = FuzzyScorer(self.similarity_calculator, self.thresholds)

        self._cache: LibraryCache | None = None

    def build_cache(self) -> LibraryCache:
        """Return the current cache, building it from the catalog if none exists"""
        if self._cache is None:
            entries = self.catalog.find_all_catalog_entries()
            self._cache = LibraryCache(entries)
            logger.info(f"Library cache built with {len(entries):,} catalog entries")
        return self._cache

    def clear_cache(self) -> None:
        """Discard the cache so the next batch reads a fresh snapshot"""
        self._cache = None

    def match_batch(self, records: list[ImportRecord]) -> list[MatchResult]:
        """Match every record, one result per record in input order

        Args:
            records: Normalized import records

        Returns:
            Match results, same length and order as ``records``
        """
        start_time = time()
        cache = self.build_cache()

        results = [self.match_record(record, cache) for record in records]

        summary = MatchSummary.from_results(results)
        logger.info(
            f"Matched {summary.total_records:,} records in {time() - start_time:.2f}s: "
            f"{summary.exact_matches} exact, {summary.high_confidence} high, "
            f"{summary.medium_confidence} medium, {summary.low_confidence} low, "
            f"{summary.unmatched} unmatched"
        )
        return results

    def match_record(self, record: ImportRecord, cache: LibraryCache) -> MatchResult:
        """Apply the tiers to a single record

        Args:
            record: Record to match
            cache: Index over the catalog snapshot

        Returns:
            The match result for the record
        """
        normalized = NormalizedRecord.from_record(record)

        lookup = self.isbn_matcher.match(record, normalized, cache)
        if lookup.entry is not None:
            return MatchResult(
                import_record=record,
                matched_book=lookup.entry,
                confidence=MatchConfidence.EXACT,
                confidence_score=self.thresholds.isbn_score,
                match_reason=MatchReason.ISBN_MATCH,
            )

        best = self.fuzzy_scorer.best_candidate(normalized, cache)
        if best is not None:
            score = floor(best.score + 0.5)
            confidence = classify_confidence(score, self.boundaries)
            if confidence is not MatchConfidence.UNMATCHED:
                return MatchResult(
                    import_record=record,
                    matched_book=best.entry,
                    confidence=confidence,
                    confidence_score=score,
                    match_reason=best.reason,
                )

        logger.debug(f"Row {record.row_number}: no match for '{record.title}'")
        return self._unmatched(record, lookup.miss_reason)

    @staticmethod
    def _unmatched(record: ImportRecord, reason: UnmatchedReason | None) -> MatchResult:
        return MatchResult(
            import_record=record,
            unmatched_reason=reason or UnmatchedReason.NO_TITLE_MATCH,
        )

    @staticmethod
    def summarize(results: list[MatchResult]) -> MatchSummary:
        """Counts per confidence tier"""
        return MatchSummary.from_results(results)
