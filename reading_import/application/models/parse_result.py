# reading_import/application/models/parse_result.py

"""Pydantic models for export normalization results"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.import_record import ImportRecord


class RowError(BaseModel):
    """A single row that could not be normalized"""

    model_config = ConfigDict(frozen=True)

    row_number: int = Field(..., ge=1, description="1-based line number in the source file")
    error: str = Field(..., description="What was wrong with the row")
    field: str | None = Field(None, description="Offending column, if known")


class SkippedRow(BaseModel):
    """A row intentionally left out, which is not an error"""

    model_config = ConfigDict(frozen=True)

    row_number: int = Field(..., ge=1)
    reason: str


class ParseResult(BaseModel):
    """Records and row-level problems from one export"""

    model_config = ConfigDict()

    provider: Provider
    records: list[ImportRecord] = Field(default_factory=list)
    errors: list[RowError] = Field(default_factory=list)
    skipped: list[SkippedRow] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    total_rows: int = Field(0, description="Data rows seen, excluding the header")

    @property
    def valid_rows(self) -> int:
        """Number of records produced"""
        return len(self.records)
