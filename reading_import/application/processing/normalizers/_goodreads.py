# reading_import/application/processing/normalizers/_goodreads.py

"""Goodreads library export rows"""

# Local imports
from reading_import.application.processing.normalizers._columns import RawRow
from reading_import.application.processing.normalizers._columns import cell
from reading_import.application.processing.normalizers._values import RowSkipped
from reading_import.application.processing.normalizers._values import parse_int
from reading_import.application.processing.normalizers._values import parse_rating
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.import_record import ImportRecord
from reading_import.shared.utils.date_utils import parse_date
from reading_import.shared.utils.isbn_utils import normalize_isbn
from reading_import.shared.utils.text_utils import clean_review
from reading_import.shared.utils.text_utils import clean_text
from reading_import.shared.utils.text_utils import split_author_names

# Goodreads keeps did-not-finish as a terminal status when a user shelves it
SHELF_STATUSES = {
    "read": ReadingStatus.READ,
    "currently-reading": ReadingStatus.CURRENTLY_READING,
    "to-read": ReadingStatus.TO_READ,
    "did-not-finish": ReadingStatus.DID_NOT_FINISH,
}


def parse_goodreads_row(row: RawRow, row_number: int) -> ImportRecord:
    """Normalize one Goodreads row

    Args:
        row: Raw row keyed by header
        row_number: 1-based line number in the source file

    Returns:
        Normalized record

    Raises:
        ValueError: Missing required values
        RowSkipped: Custom shelves, which are not reading statuses
    """
    title = clean_text(cell(row, "Title"))
    author = clean_text(cell(row, "Author"))
    shelf = clean_text(cell(row, "Exclusive Shelf"))

    if not title or not author or not shelf:
        raise ValueError("Missing required fields: Title, Author, or Exclusive Shelf")

    status = SHELF_STATUSES.get(shelf.lower())
    if status is None:
        raise RowSkipped(f"Unrecognized shelf '{shelf}'")

    authors = [author] + split_author_names(cell(row, "Additional Authors"))

    return ImportRecord(
        title=title,
        authors=authors,
        isbn=normalize_isbn(cell(row, "ISBN")),
        isbn13=normalize_isbn(cell(row, "ISBN13")),
        total_pages=parse_int(cell(row, "Number of Pages"), minimum=1),
        rating=parse_rating(cell(row, "My Rating")),
        started_date=parse_date(cell(row, "Date Added")),
        completed_date=parse_date(cell(row, "Date Read")),
        status=status,
        review=clean_review(cell(row, "My Review")),
        read_count=parse_int(cell(row, "Read Count"), minimum=1) or 1,
        row_number=row_number,
        provider=Provider.GOODREADS,
    )
