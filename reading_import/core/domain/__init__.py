# reading_import/core/domain/__init__.py

"""Domain models for the reading import engine"""

# Local imports
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import ImportStatus
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import MatchReason
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.enums import SessionStatus
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.core.domain.errors import ImportEngineError
from reading_import.core.domain.errors import ImportExpired
from reading_import.core.domain.errors import StructuralError
from reading_import.core.domain.errors import UploadRejected
from reading_import.core.domain.import_record import ImportRecord
from reading_import.core.domain.match_result import MatchResult
from reading_import.core.domain.reading_session import ProgressEntry
from reading_import.core.domain.reading_session import ReadingSession
from reading_import.core.domain.reading_session import SessionDates

__all__ = [
    "CatalogEntry",
    "ImportEngineError",
    "ImportExpired",
    "ImportRecord",
    "ImportStatus",
    "MatchConfidence",
    "MatchReason",
    "MatchResult",
    "ProgressEntry",
    "Provider",
    "ReadingSession",
    "ReadingStatus",
    "SessionDates",
    "SessionStatus",
    "StructuralError",
    "UnmatchedReason",
    "UploadRejected",
]
