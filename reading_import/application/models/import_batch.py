# reading_import/application/models/import_batch.py

"""Pydantic models for cached import batches and pipeline outcomes"""

# Standard library imports
from datetime import datetime

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from reading_import.application.models.execution_summary import ExecutionSummary
from reading_import.application.models.match_summary import MatchSummary
from reading_import.application.models.parse_result import RowError
from reading_import.core.domain.enums import ImportStatus
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.core.domain.import_record import ImportRecord
from reading_import.core.domain.match_result import MatchResult


class CachedImportBatch(BaseModel):
    """Records and match results held between scoring and execution"""

    model_config = ConfigDict()

    import_id: str
    provider: Provider
    file_name: str
    records: list[ImportRecord] = Field(default_factory=list)
    match_results: list[MatchResult] = Field(default_factory=list)
    parse_errors: list[RowError] = Field(default_factory=list)
    created_at: datetime


class UnmatchedRecord(BaseModel):
    """A record left unmatched, kept for the completion report"""

    model_config = ConfigDict(frozen=True)

    row_number: int
    title: str
    authors: list[str]
    isbn: str | None = None
    reason: UnmatchedReason
    confidence_score: int = 0


class UploadOutcome(BaseModel):
    """What the caller learns after uploading an export"""

    model_config = ConfigDict()

    import_id: str
    provider: Provider
    file_name: str
    total_rows: int
    valid_rows: int
    invalid_rows: int
    skipped_rows: int
    match_summary: MatchSummary
    errors: list[RowError] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ExecutionOutcome(BaseModel):
    """Completion report of an executed import"""

    model_config = ConfigDict()

    import_id: str
    status: ImportStatus
    summary: ExecutionSummary
    unmatched_records: list[UnmatchedRecord] = Field(default_factory=list)
    duration_seconds: float = Field(0.0, ge=0.0)
