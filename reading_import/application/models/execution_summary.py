# reading_import/application/models/execution_summary.py

"""Pydantic models for import execution results"""

# Standard library imports
from enum import Enum

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class RecordAction(Enum):
    """What the executor did with one match"""

    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


class ExecutionError(BaseModel):
    """A per-record failure isolated by the executor"""

    model_config = ConfigDict(frozen=True)

    row_number: int
    error: str


class RecordOutcome(BaseModel):
    """Result of processing one match"""

    model_config = ConfigDict(frozen=True)

    row_number: int
    entry_id: int | None = None
    book_title: str | None = None
    action: RecordAction
    reason: str
    session_id: int | None = None
    is_duplicate: bool = False


class ExecutionSummary(BaseModel):
    """Totals from turning matches into sessions"""

    model_config = ConfigDict()

    total_records: int = Field(0, description="Matches seen")
    sessions_created: int = Field(0, description="New sessions written")
    sessions_skipped: int = Field(0, description="Matches that produced no session")
    duplicates_found: int = Field(0, description="Skips caused by an existing identical session")
    ratings_updated: int = Field(0, description="Successful rating writes")
    rating_sync_failures: int = Field(0, description="Rating writes that failed")
    progress_logs_created: int = Field(0, description="Backfilled 100% progress entries")
    progress_backfill_failures: int = Field(0, description="Progress writes that failed")
    errors: list[ExecutionError] = Field(default_factory=list)
    outcomes: list[RecordOutcome] = Field(default_factory=list)

    @property
    def other_skipped(self) -> int:
        """Skips not caused by duplicates (unmatched, DNF)"""
        return self.sessions_skipped - self.duplicates_found

    def increment(self, field: str, value: int = 1) -> None:
        """Increment a statistic field

        Args:
            field: Field name to increment
            value: Amount to increment by
        """
        if hasattr(self, field):
            current = getattr(self, field)
            setattr(self, field, current + value)

    def record_error(self, row_number: int, error: Exception | str) -> None:
        """Add a per-record failure"""
        self.errors.append(ExecutionError(row_number=row_number, error=str(error)))

    def merge(self, other: "ExecutionSummary") -> None:
        """Fold the totals of another summary into this one"""
        for field in (
            "total_records",
            "sessions_created",
            "sessions_skipped",
            "duplicates_found",
            "ratings_updated",
            "rating_sync_failures",
            "progress_logs_created",
            "progress_backfill_failures",
        ):
            self.increment(field, getattr(other, field))
        self.errors.extend(other.errors)
        self.outcomes.extend(other.outcomes)

    def to_dict(self) -> dict:
        """Convert to dictionary

        Returns:
            Dictionary representation
        """
        data = self.model_dump(mode="json")
        data["other_skipped"] = self.other_skipped
        return data
