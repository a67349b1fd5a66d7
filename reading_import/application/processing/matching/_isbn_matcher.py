# reading_import/application/processing/matching/_isbn_matcher.py

"""Identifier tier of the matcher"""

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
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.core.domain.import_record import ImportRecord
from reading_import.shared.utils.isbn_utils import normalize_isbn

logger = getLogger(__name__)


class IsbnLookup(NamedTuple):
    """Outcome of the identifier tier for one record"""

    entry: CatalogEntry | None
    miss_reason: UnmatchedReason | None


class IsbnMatcher:
    """Looks up records by ISBN-13, then ISBN-10, with a title sanity check"""

    __slots__ = ("similarity_calculator", "min_title_similarity")

    def __init__(self, similarity_calculator: SimilarityCalculator, min_title_similarity: float):
        """Initialize the identifier tier

        Args:
            similarity_calculator: Title similarity source
            min_title_similarity: Title similarity an ISBN hit must reach to be accepted
        """
        self.similarity_calculator = similarity_calculator
        self.min_title_similarity = min_title_similarity

    def match(
        self, record: ImportRecord, normalized: NormalizedRecord, cache: LibraryCache
    ) -> IsbnLookup:
        """Find the catalog entry sharing an identifier with the record

        Args:
            record: Record to look up
            normalized: Matching forms of the record
            cache: Index over the catalog snapshot

        Returns:
            The accepted entry, or None with the reason the tier missed
        """
        # ISBN-13 first; both columns often normalize to the same value
        identifiers = list(
            dict.fromkeys(
                isbn
                for isbn in (normalize_isbn(record.isbn13), normalize_isbn(record.isbn))
                if isbn
            )
        )
        if not identifiers:
            return IsbnLookup(None, UnmatchedReason.NO_ISBN)

        found_any = False
        for identifier in identifiers:
            candidate = cache.find_by_isbn(identifier)
            if candidate is None:
                continue

            found_any = True
            title_score = self.similarity_calculator.title_similarity_normalized(
                normalized.title,
                normalized.main_title,
                cache.normalized_titles[candidate.id],
                cache.main_titles[candidate.id],
            )
            if title_score >= self.min_title_similarity:
                return IsbnLookup(candidate, None)

            logger.debug(
                f"Row {record.row_number}: ISBN {identifier} hit entry {candidate.id} "
                f"but title similarity {title_score:.2f} is below {self.min_title_similarity}"
            )

        if found_any:
            return IsbnLookup(None, UnmatchedReason.NO_TITLE_MATCH)
        return IsbnLookup(None, UnmatchedReason.ISBN_NOT_FOUND)
