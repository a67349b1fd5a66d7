# reading_import/application/processing/normalizers/_storygraph.py

"""TheStoryGraph export rows"""

# Local imports
from reading_import.application.processing.normalizers._columns import RawRow
from reading_import.application.processing.normalizers._columns import cell
from reading_import.application.processing.normalizers._values import RowSkipped
from reading_import.application.processing.normalizers._values import parse_rating
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.import_record import ImportRecord
from reading_import.shared.utils.date_utils import parse_date
from reading_import.shared.utils.date_utils import parse_date_range
from reading_import.shared.utils.isbn_utils import normalize_isbn
from reading_import.shared.utils.text_utils import clean_review
from reading_import.shared.utils.text_utils import clean_text
from reading_import.shared.utils.text_utils import split_author_names

READ_STATUSES = {
    "read": ReadingStatus.READ,
    "currently-reading": ReadingStatus.CURRENTLY_READING,
    "to-read": ReadingStatus.TO_READ,
    "did-not-finish": ReadingStatus.DID_NOT_FINISH,
    "paused": ReadingStatus.PAUSED,
}


def parse_storygraph_row(row: RawRow, row_number: int) -> ImportRecord:
    """Normalize one StoryGraph row

    Did-not-finish rows are dropped for this provider. "Dates Read" holds a
    start-end range; when it does not parse, "Last Date Read" is used as the
    completion date only.

    Raises:
        ValueError: Missing required values
        RowSkipped: Unknown or did-not-finish statuses
    """
    title = clean_text(cell(row, "Title"))
    authors = split_author_names(cell(row, "Authors"))
    read_status = clean_text(cell(row, "Read Status"))

    if not title or not authors or not read_status:
        raise ValueError("Missing required fields: Title, Authors, or Read Status")

    status = READ_STATUSES.get(read_status.lower())
    if status is None:
        raise RowSkipped(f"Unrecognized read status '{read_status}'")
    if status is ReadingStatus.DID_NOT_FINISH:
        raise RowSkipped("Did not finish")

    started_date = None
    completed_date = None
    date_range = parse_date_range(cell(row, "Dates Read"))
    if date_range is not None:
        started_date, completed_date = date_range
    else:
        completed_date = parse_date(cell(row, "Last Date Read"))

    return ImportRecord(
        title=title,
        authors=authors,
        isbn=normalize_isbn(cell(row, "ISBN/UID")),
        rating=parse_rating(cell(row, "Star Rating")),
        started_date=started_date,
        completed_date=completed_date,
        status=status,
        review=clean_review(cell(row, "Review")),
        row_number=row_number,
        provider=Provider.STORYGRAPH,
    )
