# reading_import/shared/utils/__init__.py

"""Shared utility functions for identifiers, dates and text"""

# Local imports
# Date utilities
from reading_import.shared.utils.date_utils import format_date
from reading_import.shared.utils.date_utils import parse_date
from reading_import.shared.utils.date_utils import parse_date_range

# ISBN utilities
from reading_import.shared.utils.isbn_utils import clean_isbn
from reading_import.shared.utils.isbn_utils import extract_isbns
from reading_import.shared.utils.isbn_utils import is_valid_isbn
from reading_import.shared.utils.isbn_utils import isbn_equals
from reading_import.shared.utils.isbn_utils import normalize_isbn
from reading_import.shared.utils.isbn_utils import strip_spreadsheet_wrapper

# Text utilities
from reading_import.shared.utils.text_utils import STOPWORDS
from reading_import.shared.utils.text_utils import clean_review
from reading_import.shared.utils.text_utils import clean_text
from reading_import.shared.utils.text_utils import main_title
from reading_import.shared.utils.text_utils import normalize_author
from reading_import.shared.utils.text_utils import normalize_authors
from reading_import.shared.utils.text_utils import normalize_for_matching
from reading_import.shared.utils.text_utils import normalize_title
from reading_import.shared.utils.text_utils import remove_title_prefix
from reading_import.shared.utils.text_utils import strip_html

__all__ = [
    # Date utilities
    "format_date",
    "parse_date",
    "parse_date_range",
    # ISBN utilities
    "clean_isbn",
    "extract_isbns",
    "is_valid_isbn",
    "isbn_equals",
    "normalize_isbn",
    "strip_spreadsheet_wrapper",
    # Text utilities
    "STOPWORDS",
    "clean_review",
    "clean_text",
    "main_title",
    "normalize_author",
    "normalize_authors",
    "normalize_for_matching",
    "normalize_title",
    "remove_title_prefix",
    "strip_html",
]
