# tests/unit/application/services/test_preview_service.py

"""Tests for the paginated import preview"""

# Standard library imports
from datetime import date

# Third party imports
import pytest

# Local imports
from reading_import.application.models.import_batch import CachedImportBatch
from reading_import.application.services import PreviewService
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import MatchReason
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.enums import SessionStatus
from reading_import.core.domain.reading_session import SessionDates
from tests.fixtures.library import FROZEN_NOW
from tests.fixtures.library import make_record
from tests.fixtures.library import matched
from tests.fixtures.library import unmatched


@pytest.fixture
def preview_service(session_store, default_config, frozen_clock) -> PreviewService:
    return PreviewService(session_store, default_config, clock=frozen_clock)


def _batch(results) -> CachedImportBatch:
    return CachedImportBatch(
        import_id="batch-1",
        provider=Provider.GOODREADS,
        file_name="goodreads_library_export.csv",
        records=[r.import_record for r in results],
        match_results=results,
        created_at=FROZEN_NOW,
    )


class TestBuildItem:
    """Test warnings and predicted actions of one item"""

    def test_clean_exact_match(self, preview_service, catalog):
        item = preview_service.build_item(matched(make_record(), catalog.get(3)))
        assert item.warnings == []
        assert item.will_create_session
        assert not item.is_duplicate
        assert item.match_reason == "Exact ISBN match"

    def test_warning_order(self, preview_service, catalog):
        record = make_record(rating=4, status=ReadingStatus.DID_NOT_FINISH)
        result = matched(
            record, catalog.get(3), MatchConfidence.LOW, 65, MatchReason.TITLE_FUZZY_RELAXED
        )
        item = preview_service.build_item(result)
        assert item.warnings == [
            "Will update book rating",
            "Book marked as Did Not Finish (DNF)",
            "Review match accuracy before importing",
        ]
        assert not item.will_create_session
        assert not item.is_duplicate

    def test_high_confidence_needs_no_review(self, preview_service, catalog):
        result = matched(
            make_record(), catalog.get(3), MatchConfidence.HIGH, 90, MatchReason.TITLE_AUTHOR_HIGH
        )
        assert preview_service.build_item(result).warnings == []

    def test_duplicate_flagged(self, preview_service, session_store, catalog):
        session_store.create_session(
            3, 1, SessionStatus.READ, SessionDates(completed_date=date(2024, 3, 2)), None, False
        )
        record = make_record(completed_date=date(2024, 3, 2))
        item = preview_service.build_item(matched(record, catalog.get(3)))
        assert item.is_duplicate
        assert not item.will_create_session
        assert item.warnings == ["Duplicate session exists - will be skipped"]

    def test_reading_duplicate_uses_derived_dates(self, preview_service, session_store, catalog):
        session_store.create_session(
            3, 1, SessionStatus.READING, SessionDates(started_date=date(2024, 1, 1)), None, True
        )
        record = make_record(
            status=ReadingStatus.CURRENTLY_READING, completed_date=date(2024, 5, 30)
        )
        item = preview_service.build_item(matched(record, catalog.get(3)))
        assert item.is_duplicate

    def test_unmatched(self, preview_service):
        item = preview_service.build_item(unmatched(make_record(title="Unknown", rating=5)))
        assert item.matched_book is None
        assert item.warnings == []
        assert not item.will_create_session
        assert item.confidence == MatchConfidence.UNMATCHED
        assert item.match_reason == "No matching book found in library"


class TestBuildPreview:
    """Test filtering and pagination"""

    @pytest.fixture
    def batch(self, catalog):
        results = [
            matched(make_record(row_number=2), catalog.get(3)),
            unmatched(make_record(title="Unknown", row_number=3)),
            matched(
                make_record(title="Project Hail Mary", authors=["Andy Weir"], row_number=4),
                catalog.get(4),
                MatchConfidence.EXACT,
                95,
                MatchReason.TITLE_AUTHOR_EXACT,
            ),
            unmatched(make_record(title="Also Unknown", row_number=5)),
            matched(
                make_record(title="Sapiens", authors=["Yuval Noah Harari"], row_number=6),
                catalog.get(5),
                MatchConfidence.MEDIUM,
                75,
                MatchReason.SUBSTRING_TITLE_MATCH,
            ),
        ]
        return _batch(results)

    def test_first_page(self, preview_service, batch):
        page = preview_service.build_preview(batch, offset=0, limit=2)
        assert [item.row_number for item in page.items] == [2, 3]
        assert page.pagination.total == 5
        assert page.pagination.has_more
        assert page.import_id == "batch-1"

    def test_last_page(self, preview_service, batch):
        page = preview_service.build_preview(batch, offset=4, limit=2)
        assert [item.row_number for item in page.items] == [6]
        assert not page.pagination.has_more

    def test_offset_past_end(self, preview_service, batch):
        page = preview_service.build_preview(batch, offset=10, limit=2)
        assert page.items == []
        assert not page.pagination.has_more

    def test_default_page_size(self, preview_service, batch):
        page = preview_service.build_preview(batch)
        assert page.pagination.limit == 500
        assert len(page.items) == 5

    def test_confidence_filter_keeps_full_summary(self, preview_service, batch):
        page = preview_service.build_preview(batch, confidence=[MatchConfidence.UNMATCHED])
        assert [item.row_number for item in page.items] == [3, 5]
        assert page.pagination.total == 2
        assert page.summary.total_records == 5
        assert page.summary.exact_matches == 2
        assert page.summary.medium_confidence == 1

    @pytest.mark.parametrize("offset,limit", [(-1, 10), (0, 0), (0, -5)])
    def test_invalid_window(self, preview_service, batch, offset, limit):
        with pytest.raises(ValueError):
            preview_service.build_preview(batch, offset=offset, limit=limit)

    def test_preview_does_not_write(self, preview_service, session_store, batch):
        preview_service.build_preview(batch)
        assert session_store.sessions == {}
        assert session_store.progress == {}
