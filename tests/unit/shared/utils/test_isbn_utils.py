# tests/unit/shared/utils/test_isbn_utils.py

"""Tests for ISBN cleanup, validation and conversion"""

# Third party imports
import pytest

# Local imports
from reading_import.shared.utils.isbn_utils import clean_isbn
from reading_import.shared.utils.isbn_utils import extract_isbns
from reading_import.shared.utils.isbn_utils import is_valid_isbn
from reading_import.shared.utils.isbn_utils import is_valid_isbn10
from reading_import.shared.utils.isbn_utils import is_valid_isbn13
from reading_import.shared.utils.isbn_utils import isbn10_to_isbn13
from reading_import.shared.utils.isbn_utils import isbn_equals
from reading_import.shared.utils.isbn_utils import normalize_isbn
from reading_import.shared.utils.isbn_utils import strip_spreadsheet_wrapper
from tests.fixtures.library import DUNE_ISBN13
from tests.fixtures.library import PRAGMATIC_ISBN10
from tests.fixtures.library import PRAGMATIC_ISBN13


class TestSpreadsheetWrapper:
    """Test removal of ="..." quoting from exported identifiers"""

    def test_wrapped_value(self):
        assert strip_spreadsheet_wrapper('="0134685997"') == "0134685997"

    def test_empty_wrapper(self):
        assert strip_spreadsheet_wrapper('=""') == ""

    def test_plain_value_unchanged(self):
        assert strip_spreadsheet_wrapper(" 9780134685991 ") == "9780134685991"

    def test_none(self):
        assert strip_spreadsheet_wrapper(None) == ""


class TestValidation:
    """Test check digit validation"""

    def test_valid_isbn13(self):
        assert is_valid_isbn13(PRAGMATIC_ISBN13)
        assert is_valid_isbn13(DUNE_ISBN13)

    def test_invalid_isbn13_check_digit(self):
        assert not is_valid_isbn13("9780134685992")

    def test_valid_isbn10(self):
        assert is_valid_isbn10(PRAGMATIC_ISBN10)

    def test_isbn10_with_x_check_digit(self):
        assert is_valid_isbn10("080442957X")

    def test_x_only_allowed_in_last_position(self):
        assert not is_valid_isbn10("08044295X7")

    def test_is_valid_isbn_accepts_both_lengths(self):
        assert is_valid_isbn(PRAGMATIC_ISBN10)
        assert is_valid_isbn(PRAGMATIC_ISBN13)
        assert not is_valid_isbn("12345")

    def test_clean_isbn_rejects_other_lengths(self):
        assert clean_isbn("978-0-13") is None
        assert clean_isbn(None) is None

    def test_clean_isbn_uppercases_x(self):
        assert clean_isbn("0-8044-2957-x") == "080442957X"


class TestNormalization:
    """Test normalization to canonical ISBN-13"""

    @pytest.mark.parametrize(
        "raw",
        [
            "978-0-13-468599-1",
            "9780134685991",
            "0-13-468599-7",
            "0134685997",
            '="0134685997"',
            '="9780134685991"',
            " 978 0 13 468599 1 ",
        ],
    )
    def test_equivalent_forms(self, raw):
        assert normalize_isbn(raw) == PRAGMATIC_ISBN13

    @pytest.mark.parametrize(
        "raw", [None, "", "=\"\"", "978-0-13-468599-2", "12345", "not an isbn", "0134685998"]
    )
    def test_invalid_values(self, raw):
        assert normalize_isbn(raw) is None

    def test_isbn10_with_x_converts(self):
        assert isbn10_to_isbn13("080442957X") == "9780804429573"

    def test_conversion_of_invalid_isbn10(self):
        assert isbn10_to_isbn13("0134685998") is None

    def test_isbn_equals_across_forms(self):
        assert isbn_equals(PRAGMATIC_ISBN10, PRAGMATIC_ISBN13)
        assert isbn_equals("978-0-13-468599-1", '="0134685997"')

    def test_isbn_equals_different_books(self):
        assert not isbn_equals(PRAGMATIC_ISBN13, DUNE_ISBN13)

    def test_isbn_equals_invalid_never_equal(self):
        assert not isbn_equals(None, None)
        assert not isbn_equals("garbage", "garbage")


class TestExtraction:
    """Test finding ISBNs in free text"""

    def test_multiple_isbns(self):
        text = "Paperback ISBN 978-0-13-468599-1 and older edition 0-441-17271-7"
        assert extract_isbns(text) == [PRAGMATIC_ISBN13, DUNE_ISBN13]

    def test_duplicates_collapsed(self):
        assert extract_isbns("0134685997 / 9780134685991") == [PRAGMATIC_ISBN13]

    def test_invalid_candidates_ignored(self):
        assert extract_isbns("call 555-123-4567") == []

    def test_empty(self):
        assert extract_isbns(None) == []
