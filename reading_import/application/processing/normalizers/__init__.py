# reading_import/application/processing/normalizers/__init__.py

"""Record normalization for supported reading-history export formats"""

# Local imports
from reading_import.application.processing.normalizers._columns import REQUIRED_COLUMNS
from reading_import.application.processing.normalizers._columns import RawRow
from reading_import.application.processing.normalizers._columns import detect_provider
from reading_import.application.processing.normalizers._columns import validate_headers
from reading_import.application.processing.normalizers._goodreads import (
    parse_goodreads_row,
)
from reading_import.application.processing.normalizers._record_normalizer import (
    RecordNormalizer,
)
from reading_import.application.processing.normalizers._record_normalizer import (
    row_parser_for,
)
from reading_import.application.processing.normalizers._storygraph import (
    parse_storygraph_row,
)
from reading_import.application.processing.normalizers._values import RowSkipped

__all__ = [
    "REQUIRED_COLUMNS",
    "RawRow",
    "RecordNormalizer",
    "RowSkipped",
    "detect_provider",
    "parse_goodreads_row",
    "parse_storygraph_row",
    "row_parser_for",
    "validate_headers",
]
