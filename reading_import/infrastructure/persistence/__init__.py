# reading_import/infrastructure/persistence/__init__.py

"""Persistence infrastructure: CSV reading and catalog/session stores"""

# Local imports
from reading_import.infrastructure.persistence._csv_reader import CsvTable
from reading_import.infrastructure.persistence._csv_reader import read_csv_table
from reading_import.infrastructure.persistence._json_library import JsonLibraryStore
from reading_import.infrastructure.persistence._json_library import LibrarySnapshot
from reading_import.infrastructure.persistence._memory_stores import InMemoryCatalog
from reading_import.infrastructure.persistence._memory_stores import (
    InMemorySessionStore,
)

__all__ = [
    "CsvTable",
    "InMemoryCatalog",
    "InMemorySessionStore",
    "JsonLibraryStore",
    "LibrarySnapshot",
    "read_csv_table",
]
