# reading_import/application/services/__init__.py

"""Services orchestrating normalization, matching, preview and execution"""

# Local imports
from reading_import.application.services._import_executor import ImportExecutor
from reading_import.application.services._import_executor import ReReadResult
from reading_import.application.services._import_executor import derive_session_dates
from reading_import.application.services._import_executor import map_session_status
from reading_import.application.services._import_service import ImportService
from reading_import.application.services._preview_service import PreviewService

__all__ = [
    "ImportExecutor",
    "ImportService",
    "PreviewService",
    "ReReadResult",
    "derive_session_dates",
    "map_session_status",
]
