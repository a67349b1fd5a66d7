# tests/unit/application/processing/normalizers/test_storygraph_normalizer.py

"""Tests for StoryGraph export normalization and provider detection"""

# Standard library imports
from datetime import date

# Third party imports
import pytest

# Local imports
from reading_import.application.processing.normalizers import RecordNormalizer
from reading_import.application.processing.normalizers import RowSkipped
from reading_import.application.processing.normalizers import detect_provider
from reading_import.application.processing.normalizers import parse_storygraph_row
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.errors import StructuralError
from tests.fixtures.library import GOODREADS_HEADERS
from tests.fixtures.library import STORYGRAPH_HEADERS
from tests.fixtures.library import storygraph_csv


def _row(**kwargs) -> dict[str, str]:
    row = {
        "Title": "Project Hail Mary",
        "Authors": "Andy Weir",
        "Read Status": "read",
        "Dates Read": "2024/01/17-2024/01/19",
    }
    row.update(kwargs)
    return row


class TestParseStorygraphRow:
    """Test single row normalization"""

    def test_date_range(self):
        record = parse_storygraph_row(_row(), 2)
        assert record.started_date == date(2024, 1, 17)
        assert record.completed_date == date(2024, 1, 19)
        assert record.provider == Provider.STORYGRAPH

    def test_last_date_read_fallback(self):
        record = parse_storygraph_row(_row(**{"Dates Read": "", "Last Date Read": "2023/12/05"}), 2)
        assert record.started_date is None
        assert record.completed_date == date(2023, 12, 5)

    @pytest.mark.parametrize("value,expected", [("4.5", 5), ("3.25", 3), ("0", None), ("", None)])
    def test_fractional_ratings(self, value, expected):
        assert parse_storygraph_row(_row(**{"Star Rating": value}), 2).rating == expected

    def test_multiple_authors(self):
        record = parse_storygraph_row(_row(Authors="Terry Pratchett, Neil Gaiman"), 2)
        assert record.authors == ["Terry Pratchett", "Neil Gaiman"]

    def test_isbn_uid(self):
        record = parse_storygraph_row(_row(**{"ISBN/UID": "9780593135204"}), 2)
        assert record.isbn == "9780593135204"
        assert record.isbn13 is None

    def test_non_isbn_uid_dropped(self):
        assert parse_storygraph_row(_row(**{"ISBN/UID": "sg-12345"}), 2).isbn is None

    def test_paused(self):
        assert parse_storygraph_row(_row(**{"Read Status": "paused"}), 2).status == (
            ReadingStatus.PAUSED
        )

    def test_did_not_finish_skipped(self):
        with pytest.raises(RowSkipped, match="Did not finish"):
            parse_storygraph_row(_row(**{"Read Status": "did-not-finish"}), 2)

    def test_missing_authors(self):
        with pytest.raises(ValueError):
            parse_storygraph_row(_row(Authors=""), 2)


class TestStorygraphBatch:
    """Test batch normalization of a StoryGraph export"""

    def test_dnf_counted_as_skipped(self):
        abandoned = _row(Title="Abandoned", **{"Read Status": "did-not-finish"})
        csv_text = storygraph_csv([_row(), abandoned])
        result = RecordNormalizer().parse_csv(csv_text, Provider.STORYGRAPH)
        assert len(result.records) == 1
        assert result.skipped[0].row_number == 3
        assert result.skipped[0].reason == "Did not finish"

    def test_missing_columns(self):
        with pytest.raises(StructuralError) as exc_info:
            RecordNormalizer().parse_csv("Title,Authors\nDune,Frank Herbert\n", Provider.STORYGRAPH)
        assert exc_info.value.missing_columns == ["Read Status"]

    def test_provider_mismatch_warning(self):
        table_headers = STORYGRAPH_HEADERS + ["Author", "Exclusive Shelf"]
        rows = [dict(_row(), Author="Andy Weir", **{"Exclusive Shelf": "read"})]
        result = RecordNormalizer().normalize(rows, Provider.STORYGRAPH, table_headers)
        assert result.warnings == [
            "CSV appears to be from Goodreads but TheStoryGraph was selected"
        ]


class TestDetectProvider:
    """Test provider detection from headers"""

    def test_goodreads(self):
        assert detect_provider(GOODREADS_HEADERS) == Provider.GOODREADS

    def test_storygraph(self):
        assert detect_provider(STORYGRAPH_HEADERS) == Provider.STORYGRAPH

    def test_unknown(self):
        assert detect_provider(["Name", "Writer"]) is None
