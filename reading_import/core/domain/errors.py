# reading_import/core/domain/errors.py

"""Exception hierarchy for the reading import engine

Only failures that stop a pipeline outright are exceptions:

    ImportEngineError (base)
    ├── StructuralError - unreadable table or missing required columns
    ├── UploadRejected - file too large or not a CSV file
    └── ImportExpired - cached import batch missing or past its TTL

Row-level parse failures and per-record execution failures are data
(RowError, ExecutionError) collected into result models.
"""


class ImportEngineError(Exception):
    """Base exception for all reading import errors"""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        """Initialize the error

        Args:
            message: Human-readable error message
            details: Optional structured details for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class StructuralError(ImportEngineError):
    """Malformed input that aborts a batch before any record is produced"""

    def __init__(self, message: str, *, missing_columns: list[str] | None = None) -> None:
        details = {"missing_columns": ", ".join(missing_columns)} if missing_columns else None
        super().__init__(message, details=details)
        self.missing_columns = missing_columns or []


class UploadRejected(ImportEngineError):
    """Upload failed size or file type validation"""


class ImportExpired(ImportEngineError):
    """Cached import batch is unavailable; the export must be uploaded again"""

    def __init__(self, import_id: str) -> None:
        super().__init__(
            "Import not found or expired. Please re-upload the file.",
            details={"import_id": import_id},
        )
        self.import_id = import_id
