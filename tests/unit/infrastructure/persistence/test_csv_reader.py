# tests/unit/infrastructure/persistence/test_csv_reader.py

"""Tests for reading uploaded CSV text"""

# Third party imports
import pytest

# Local imports
from reading_import.core.domain.errors import StructuralError
from reading_import.infrastructure.persistence import read_csv_table


class TestReadCsvTable:
    """Test header and row handling"""

    def test_basic_table(self):
        table = read_csv_table("Title,Author\nDune,Frank Herbert\n")
        assert table.headers == ["Title", "Author"]
        assert table.rows == [{"Title": "Dune", "Author": "Frank Herbert"}]

    def test_byte_order_mark_removed(self):
        table = read_csv_table("\ufeffTitle,Author\nDune,Frank Herbert\n")
        assert table.headers[0] == "Title"

    def test_values_and_headers_trimmed(self):
        table = read_csv_table(" Title , Author \n  Dune ,Frank Herbert\n")
        assert table.rows == [{"Title": "Dune", "Author": "Frank Herbert"}]

    def test_quoted_commas_and_newlines(self):
        table = read_csv_table('Title,Review\n"Good Omens, a novel","Line one\nLine two"\n')
        assert table.rows[0]["Title"] == "Good Omens, a novel"
        assert table.rows[0]["Review"] == "Line one\nLine two"

    def test_blank_lines_skipped(self):
        table = read_csv_table("Title,Author\n\n,\nDune,Frank Herbert\n")
        assert len(table.rows) == 1

    def test_short_rows_have_missing_cells(self):
        table = read_csv_table("Title,Author\nDune\n")
        assert table.rows[0]["Author"] is None

    def test_extra_cells_dropped(self):
        table = read_csv_table("Title\nDune,extra\n")
        assert table.rows == [{"Title": "Dune"}]

    def test_headers_only(self):
        table = read_csv_table("Title,Author\n")
        assert table.rows == []

    @pytest.mark.parametrize("text", ["", "   \n", "\ufeff"])
    def test_empty(self, text):
        with pytest.raises(StructuralError, match="empty"):
            read_csv_table(text)
