# reading_import/infrastructure/persistence/_csv_reader.py

"""CSV table reader for uploaded exports"""

# Standard library imports
import csv
from csv import DictReader
from io import StringIO
from logging import getLogger
from typing import NamedTuple

# Local imports
from reading_import.core.domain.errors import StructuralError

logger = getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


class CsvTable(NamedTuple):
    """Header row plus data rows keyed by header"""

    headers: list[str]
    rows: list[dict[str, str | None]]


def read_csv_table(text: str) -> CsvTable:
    """Parse CSV text with a header row

    Header names and cell values are trimmed, blank lines are skipped and
    cells beyond the header width are dropped.

    Args:
        text: Entire CSV document

    Returns:
        Parsed table

    Raises:
        StructuralError: If the text is empty or is not readable as CSV
    """
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK) :]

    if not text.strip():
        raise StructuralError("CSV file is empty or contains only headers")

    try:
        reader = DictReader(StringIO(text, newline=""))
        raw_headers = reader.fieldnames or []
        headers = [header.strip() for header in raw_headers]

        rows: list[dict[str, str | None]] = []
        for raw_row in reader:
            row = {
                header.strip(): value.strip() if isinstance(value, str) else None
                for header, value in raw_row.items()
                if header is not None
            }
            if any(row.values()):
                rows.append(row)
    except csv.Error as e:
        raise StructuralError(f"Failed to parse CSV: {e}") from e

    if not headers:
        raise StructuralError("CSV file is empty or contains only headers")

    logger.debug(f"Read CSV table with {len(headers)} columns and {len(rows):,} rows")
    return CsvTable(headers, rows)
