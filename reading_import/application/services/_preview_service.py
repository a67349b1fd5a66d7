# reading_import/application/services/_preview_service.py

"""Paginated preview of a cached import batch"""

# Standard library imports
from datetime import datetime
from logging import getLogger

# Local imports
from reading_import.application.models.import_batch import CachedImportBatch
from reading_import.application.models.match_summary import MatchSummary
from reading_import.application.models.preview import Pagination
from reading_import.application.models.preview import PreviewItem
from reading_import.application.models.preview import PreviewPage
from reading_import.application.processing.matching import describe_reason
from reading_import.application.services._import_executor import derive_session_dates
from reading_import.application.services._import_executor import map_session_status
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.match_result import MatchResult
from reading_import.core.types.protocols import SessionStore
from reading_import.core.types.protocols import WallClock
from reading_import.infrastructure.config import ConfigLoader
from reading_import.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)

RATING_WARNING = "Will update book rating"
DNF_WARNING = "Book marked as Did Not Finish (DNF)"
REVIEW_WARNING = "Review match accuracy before importing"
DUPLICATE_WARNING = "Duplicate session exists - will be skipped"

REVIEW_CONFIDENCES = frozenset({MatchConfidence.MEDIUM, MatchConfidence.LOW})


class PreviewService(ConfigurableMixin):
    """Builds what the user reviews before confirming an import

    The preview reads the session collaborator for duplicate checks but
    never writes. Duplicate detection uses the same derived dates as the
    executor, so an item flagged here is exactly one the executor skips.
    """

    def __init__(
        self,
        session_store: SessionStore,
        config: ConfigLoader | None = None,
        clock: WallClock = datetime.now,
    ):
        self.config = self._init_config(config)
        self.session_store = session_store
        self.clock = clock

    def build_preview(
        self,
        batch: CachedImportBatch,
        confidence: list[MatchConfidence] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> PreviewPage:
        """Build one page of preview items

        The summary always covers the whole batch; the confidence filter
        only narrows the paginated items.

        Args:
            batch: Cached import batch
            confidence: Tiers to include, None or empty for all
            offset: Index of the first filtered result on the page
            limit: Page size, defaults to the configured page size

        Returns:
            Preview page with pagination metadata

        Raises:
            ValueError: If offset is negative or limit is not positive
        """
        if limit is None:
            limit = self.config.imports.preview_page_size
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        results = batch.match_results
        if confidence:
            wanted = set(confidence)
            results = [r for r in results if r.confidence in wanted]

        total = len(results)
        page = results[offset : offset + limit]
        logger.debug(
            f"Preview of import {batch.import_id}: {len(page)} of {total} filtered results "
            f"(offset {offset}, limit {limit})"
        )

        return PreviewPage(
            import_id=batch.import_id,
            file_name=batch.file_name,
            provider=batch.provider,
            summary=MatchSummary.from_results(batch.match_results),
            items=[self.build_item(result) for result in page],
            pagination=Pagination(
                offset=offset, limit=limit, total=total, has_more=offset + limit < total
            ),
        )

    def build_item(self, result: MatchResult) -> PreviewItem:
        """Preview item with warnings and the predicted executor action"""
        record = result.import_record
        entry = result.matched_book
        warnings: list[str] = []

        if entry is not None and record.rating:
            warnings.append(RATING_WARNING)

        is_dnf = record.status is ReadingStatus.DID_NOT_FINISH
        if is_dnf:
            warnings.append(DNF_WARNING)

        if result.confidence in REVIEW_CONFIDENCES:
            warnings.append(REVIEW_WARNING)

        is_duplicate = False
        if entry is not None and not is_dnf:
            status = map_session_status(record.status)
            dates = derive_session_dates(record, status, self.clock().date())
            duplicate = self.session_store.find_duplicate_session(
                entry.id, status, dates.completed_date, record.rating
            )
            if duplicate is not None:
                is_duplicate = True
                warnings.append(DUPLICATE_WARNING)

        return PreviewItem(
            row_number=record.row_number,
            import_data=record,
            matched_book=entry,
            match_reason=describe_reason(result.match_reason),
            confidence=result.confidence,
            confidence_score=result.confidence_score,
            will_create_session=entry is not None and not is_duplicate and not is_dnf,
            is_duplicate=is_duplicate,
            warnings=warnings,
        )
