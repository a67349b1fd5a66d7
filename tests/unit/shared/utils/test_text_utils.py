# tests/unit/shared/utils/test_text_utils.py

"""Tests for text cleaning and normalization utilities"""

# Third party imports
import pytest

# Local imports
from reading_import.shared.utils.text_utils import clean_review
from reading_import.shared.utils.text_utils import clean_text
from reading_import.shared.utils.text_utils import main_title
from reading_import.shared.utils.text_utils import normalize_author
from reading_import.shared.utils.text_utils import normalize_authors
from reading_import.shared.utils.text_utils import normalize_for_matching
from reading_import.shared.utils.text_utils import normalize_title
from reading_import.shared.utils.text_utils import remove_stopwords
from reading_import.shared.utils.text_utils import remove_title_prefix
from reading_import.shared.utils.text_utils import split_author_names
from reading_import.shared.utils.text_utils import strip_html


class TestHtmlCleanup:
    """Test markup removal for reviews and titles"""

    def test_line_breaks_become_newlines(self):
        assert strip_html("Great<br/>book") == "Great\nbook"

    def test_entities_decoded(self):
        assert strip_html("Pride &amp; Prejudice") == "Pride & Prejudice"

    def test_plain_text_untouched(self):
        assert strip_html("A plain < comparison") == "A plain < comparison"

    def test_clean_text_collapses_whitespace(self):
        assert clean_text("  <b>Dune</b>\n  Messiah ") == "Dune Messiah"

    def test_clean_text_empty_is_none(self):
        assert clean_text("   ") is None
        assert clean_text(None) is None

    def test_clean_review_keeps_paragraphs(self):
        assert clean_review("First   line<br><br>Second  line") == "First line\nSecond line"

    def test_clean_review_empty(self):
        assert clean_review("<br/>") is None


class TestNormalizeForMatching:
    """Test the case, accent and punctuation insensitive form"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("The Land of Stories: The Wishing Spell", "the land of stories the wishing spell"),
            ("Les Misérables", "les miserables"),
            ("Ender's Game", "enders game"),
            ("Catch-22", "catch 22"),
            ("  Multiple   Spaces ", "multiple spaces"),
            ("", ""),
        ],
    )
    def test_examples(self, text, expected):
        assert normalize_for_matching(text) == expected


class TestTitles:
    """Test title normalization"""

    def test_main_title_colon(self):
        assert main_title("Sapiens: A Brief History of Humankind") == "Sapiens"

    def test_main_title_series_parenthesis(self):
        assert main_title("Dune (Dune Chronicles, #1)") == "Dune"

    def test_main_title_without_subtitle(self):
        assert main_title("Project Hail Mary") == "Project Hail Mary"

    def test_main_title_leading_colon_keeps_title(self):
        assert main_title(": Odd") == ": Odd"

    def test_normalize_title_remove_subtitle(self):
        assert normalize_title("The Hobbit: There and Back Again", remove_subtitle=True) == (
            "the hobbit"
        )

    def test_normalize_title_remove_stopwords(self):
        assert normalize_title("The Lord of the Rings", remove_stopwords_flag=True) == "lord rings"

    def test_remove_stopwords_keeps_all_stopword_titles(self):
        assert remove_stopwords("it") == "it"

    def test_remove_title_prefix(self):
        assert remove_title_prefix("The Lord of the Rings") == "Lord of the Rings"
        assert remove_title_prefix("An Unkindness of Ghosts") == "Unkindness of Ghosts"
        assert remove_title_prefix("Theory of Everything") == "Theory of Everything"


class TestAuthors:
    """Test author normalization"""

    def test_last_first_reordered(self):
        assert normalize_author("Colfer, Chris") == "chris colfer"

    def test_initials(self):
        assert normalize_author("J.R.R. Tolkien") == "j r r tolkien"

    def test_accents_folded(self):
        assert normalize_author("Gabriel García Márquez") == "gabriel garcia marquez"

    def test_normalize_authors_drops_empty(self):
        assert normalize_authors(["Colfer, Chris", "", "Andy Weir"]) == [
            "chris colfer",
            "andy weir",
        ]

    def test_normalize_authors_from_string(self):
        assert normalize_authors("Andy Weir; Frank Herbert") == ["andy weir", "frank herbert"]

    def test_split_author_names(self):
        assert split_author_names("Andrew Hunt, David Thomas") == ["Andrew Hunt", "David Thomas"]
        assert split_author_names("") == []
