# reading_import/adapters/exporters/csv_exporter.py

"""CSV export of records left unmatched by an import"""

# Standard library imports
from csv import writer
from logging import getLogger

# Local imports
from reading_import.application.models.import_batch import UnmatchedRecord
from reading_import.core.domain.enums import UnmatchedReason

logger = getLogger(__name__)

UNMATCHED_HEADERS = ["Row", "Title", "Authors", "ISBN", "Reason", "Reason Detail"]

UNMATCHED_REASON_DESCRIPTIONS = {
    UnmatchedReason.NO_ISBN: "No ISBN in the export row",
    UnmatchedReason.ISBN_NOT_FOUND: "ISBN not in library",
    UnmatchedReason.NO_TITLE_MATCH: "No title match found",
}


def save_unmatched_csv(records: list[UnmatchedRecord], csv_file: str) -> int:
    """Write unmatched records so they can be fixed and re-imported

    Args:
        records: Unmatched records from an execution report
        csv_file: Output filename

    Returns:
        Number of data rows written
    """
    with open(csv_file, "w", encoding="utf-8", newline="") as f:
        csv_writer = writer(f)
        csv_writer.writerow(UNMATCHED_HEADERS)
        for record in sorted(records, key=lambda r: r.row_number):
            csv_writer.writerow(
                [
                    record.row_number,
                    record.title,
                    "; ".join(record.authors),
                    record.isbn or "",
                    record.reason.value,
                    UNMATCHED_REASON_DESCRIPTIONS[record.reason],
                ]
            )

    logger.info(f"Wrote {len(records):,} unmatched records to {csv_file}")
    return len(records)
