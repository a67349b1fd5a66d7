# reading_import/application/models/__init__.py

"""Application models for parse, match, preview and execution results"""

# Local imports
from reading_import.application.models.execution_summary import ExecutionError
from reading_import.application.models.execution_summary import ExecutionSummary
from reading_import.application.models.execution_summary import RecordAction
from reading_import.application.models.execution_summary import RecordOutcome
from reading_import.application.models.import_batch import CachedImportBatch
from reading_import.application.models.import_batch import ExecutionOutcome
from reading_import.application.models.import_batch import UnmatchedRecord
from reading_import.application.models.import_batch import UploadOutcome
from reading_import.application.models.match_summary import MatchSummary
from reading_import.application.models.parse_result import ParseResult
from reading_import.application.models.parse_result import RowError
from reading_import.application.models.parse_result import SkippedRow
from reading_import.application.models.preview import Pagination
from reading_import.application.models.preview import PreviewItem
from reading_import.application.models.preview import PreviewPage

__all__ = [
    "CachedImportBatch",
    "ExecutionError",
    "ExecutionOutcome",
    "ExecutionSummary",
    "MatchSummary",
    "Pagination",
    "ParseResult",
    "PreviewItem",
    "PreviewPage",
    "RecordAction",
    "RecordOutcome",
    "RowError",
    "SkippedRow",
    "UnmatchedRecord",
    "UploadOutcome",
]
