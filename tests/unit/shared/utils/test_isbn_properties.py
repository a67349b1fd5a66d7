# tests/unit/shared/utils/test_isbn_properties.py

"""Property-based tests for ISBN normalization

Whatever the input, normalization either rejects it or yields a valid
ISBN-13, and every valid ISBN-10 maps onto an equivalent ISBN-13.
"""

# Third party imports
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.strategies import composite

# Local imports
from reading_import.shared.utils.isbn_utils import is_valid_isbn10
from reading_import.shared.utils.isbn_utils import is_valid_isbn13
from reading_import.shared.utils.isbn_utils import isbn_equals
from reading_import.shared.utils.isbn_utils import normalize_isbn


@composite
def valid_isbn10(draw: st.DrawFn) -> str:
    """Generate ISBN-10 strings with a correct check digit"""
    body = draw(st.text(alphabet="0123456789", min_size=9, max_size=9))
    total = sum((10 - position) * int(char) for position, char in enumerate(body))
    check = (11 - total % 11) % 11
    return body + ("X" if check == 10 else str(check))


@composite
def hyphenated(draw: st.DrawFn, isbn: str) -> str:
    """Insert hyphens and spaces between the characters of an ISBN"""
    gaps = len(isbn) - 1
    separators = draw(st.lists(st.sampled_from(["", "-", " "]), min_size=gaps, max_size=gaps))
    return isbn[0] + "".join(sep + char for sep, char in zip(separators, isbn[1:]))


class TestISBNNormalizationProperties:
    """Property-based tests for normalize_isbn"""

    @given(st.text())
    def test_result_is_none_or_valid_isbn13(self, value: str) -> None:
        """Normalization never produces an invalid identifier"""
        result = normalize_isbn(value)
        assert result is None or (len(result) == 13 and is_valid_isbn13(result))

    @given(st.text())
    def test_idempotent(self, value: str) -> None:
        """Normalizing a normalized ISBN gives the same value"""
        once = normalize_isbn(value)
        if once is not None:
            assert normalize_isbn(once) == once

    @given(valid_isbn10())
    def test_isbn10_converts_to_978_isbn13(self, isbn10: str) -> None:
        """Every valid ISBN-10 has a 978-prefixed equivalent"""
        assert is_valid_isbn10(isbn10)
        result = normalize_isbn(isbn10)
        assert result is not None
        assert result.startswith("978")
        assert result[3:12] == isbn10[:9]
        assert isbn_equals(isbn10, result)

    @given(st.data())
    def test_separators_do_not_matter(self, data: st.DataObject) -> None:
        """Hyphens and spaces are ignored"""
        isbn10 = data.draw(valid_isbn10())
        decorated = data.draw(hyphenated(isbn10))
        assert normalize_isbn(decorated) == normalize_isbn(isbn10)
