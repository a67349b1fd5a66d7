# reading_import/application/processing/normalizers/_record_normalizer.py

"""Provider dispatch turning raw export rows into import records"""

# Standard library imports
from collections.abc import Callable
from logging import getLogger
from typing import assert_never

# Third party imports
from pydantic import ValidationError

# Local imports
from reading_import.application.models.parse_result import ParseResult
from reading_import.application.models.parse_result import RowError
from reading_import.application.models.parse_result import SkippedRow
from reading_import.application.processing.normalizers._columns import RawRow
from reading_import.application.processing.normalizers._columns import (
    provider_mismatch_warning,
)
from reading_import.application.processing.normalizers._columns import validate_headers
from reading_import.application.processing.normalizers._goodreads import (
    parse_goodreads_row,
)
from reading_import.application.processing.normalizers._storygraph import (
    parse_storygraph_row,
)
from reading_import.application.processing.normalizers._values import RowSkipped
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.errors import StructuralError
from reading_import.core.domain.import_record import ImportRecord
from reading_import.infrastructure.persistence import read_csv_table

logger = getLogger(__name__)

type RowParser = Callable[[RawRow, int], ImportRecord]

# Row 1 holds the headers
FIRST_DATA_ROW = 2


def row_parser_for(provider: Provider) -> RowParser:
    """Select the row normalizer for a provider"""
    match provider:
        case Provider.GOODREADS:
            return parse_goodreads_row
        case Provider.STORYGRAPH:
            return parse_storygraph_row
        case _:
            assert_never(provider)


def _format_validation_error(error: ValidationError) -> str:
    """First validation problem as a single readable line"""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid {location}: {first['msg']}" if location else first["msg"]


class RecordNormalizer:
    """Parses raw export rows for one provider format

    Rows are independent: a row that fails produces a RowError and the batch
    continues. Only structural problems (no data, missing required columns)
    raise.
    """

    __slots__ = ()

    def normalize(
        self, raw_rows: list[RawRow], provider: Provider, headers: list[str] | None = None
    ) -> ParseResult:
        """Normalize parsed rows

        Args:
            raw_rows: Rows keyed by header
            provider: Export format of the rows
            headers: Header row, taken from the first row when omitted

        Returns:
            Records, row errors, skipped rows and warnings

        Raises:
            StructuralError: No data rows or missing required columns
        """
        if not raw_rows:
            raise StructuralError("CSV file is empty or contains only headers")

        header_list = headers if headers is not None else list(raw_rows[0].keys())
        validate_headers(header_list, provider)

        result = ParseResult(provider=provider, total_rows=len(raw_rows))

        warning = provider_mismatch_warning(header_list, provider)
        if warning:
            logger.warning(warning)
            result.warnings.append(warning)

        parse_row = row_parser_for(provider)

        for index, row in enumerate(raw_rows):
            row_number = index + FIRST_DATA_ROW
            try:
                result.records.append(parse_row(row, row_number))
            except RowSkipped as skip:
                result.skipped.append(SkippedRow(row_number=row_number, reason=skip.reason))
            except ValidationError as e:
                result.errors.append(
                    RowError(row_number=row_number, error=_format_validation_error(e))
                )
            except ValueError as e:
                result.errors.append(RowError(row_number=row_number, error=str(e)))

        logger.info(
            f"Normalized {provider.display_name} export: {len(result.records):,} records, "
            f"{len(result.skipped):,} skipped, {len(result.errors):,} errors"
        )
        return result

    def parse_csv(self, csv_text: str, provider: Provider) -> ParseResult:
        """Read CSV text and normalize its rows

        Raises:
            StructuralError: Unreadable table, no data rows or missing required columns
        """
        table = read_csv_table(csv_text)
        return self.normalize(table.rows, provider, table.headers)
