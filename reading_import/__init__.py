# reading_import/__init__.py

"""Reading Import Package

A library for importing Goodreads and TheStoryGraph reading history into
a book library: export rows are normalized, matched against the catalog
and turned into reading sessions.
"""

# Local imports
# High-level API
from reading_import.application.services import ImportExecutor
from reading_import.application.services import ImportService
from reading_import.application.services import PreviewService

# Processing components (for advanced users)
from reading_import.application.processing.matching import LibraryMatcher
from reading_import.application.processing.normalizers import RecordNormalizer

# Data models
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.errors import ImportEngineError
from reading_import.core.domain.errors import ImportExpired
from reading_import.core.domain.errors import StructuralError
from reading_import.core.domain.errors import UploadRejected
from reading_import.core.domain.import_record import ImportRecord
from reading_import.core.domain.match_result import MatchResult

# For users who want lower-level control
from reading_import.infrastructure.cache import ImportBatchCache
from reading_import.infrastructure.config import ConfigLoader
from reading_import.infrastructure.persistence import InMemoryCatalog
from reading_import.infrastructure.persistence import InMemorySessionStore
from reading_import.infrastructure.persistence import JsonLibraryStore

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "ImportService",
    "ImportExecutor",
    "PreviewService",
    # Data models
    "CatalogEntry",
    "ImportRecord",
    "MatchResult",
    "MatchConfidence",
    "Provider",
    "ReadingStatus",
    # Errors
    "ImportEngineError",
    "ImportExpired",
    "StructuralError",
    "UploadRejected",
    # Advanced usage - processing
    "LibraryMatcher",
    "RecordNormalizer",
    # Advanced usage - infrastructure
    "ConfigLoader",
    "ImportBatchCache",
    "InMemoryCatalog",
    "InMemorySessionStore",
    "JsonLibraryStore",
    # Version
    "__version__",
]
