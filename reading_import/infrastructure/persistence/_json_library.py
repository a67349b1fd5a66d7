# reading_import/infrastructure/persistence/_json_library.py

"""JSON file holding a library catalog with its sessions"""

# Standard library imports
from json import JSONDecodeError
from json import dump as json_dump
from json import load as json_load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

# Local imports
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.errors import ImportEngineError
from reading_import.core.domain.reading_session import ProgressEntry
from reading_import.core.domain.reading_session import ReadingSession
from reading_import.infrastructure.persistence._memory_stores import InMemoryCatalog
from reading_import.infrastructure.persistence._memory_stores import (
    InMemorySessionStore,
)

logger = getLogger(__name__)


class LibrarySnapshot(BaseModel):
    """On-disk layout of a library file"""

    entries: list[CatalogEntry] = Field(default_factory=list)
    sessions: list[ReadingSession] = Field(default_factory=list)
    progress: list[ProgressEntry] = Field(default_factory=list)


class JsonLibraryStore:
    """Loads a library file into in-memory stores and writes it back"""

    __slots__ = ("path", "catalog", "sessions")

    def __init__(self, path: Path | str) -> None:
        """Load the library file

        Args:
            path: Library JSON file

        Raises:
            ImportEngineError: If the file cannot be read or is invalid
        """
        self.path = Path(path)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                snapshot = LibrarySnapshot.model_validate(json_load(f))
        except (OSError, JSONDecodeError, ValidationError) as e:
            raise ImportEngineError(f"Failed to load library from {self.path}: {e}") from e

        self.catalog = InMemoryCatalog(snapshot.entries)
        self.sessions = InMemorySessionStore(self.catalog, snapshot.sessions, snapshot.progress)
        logger.info(
            f"Loaded library {self.path}: {len(snapshot.entries):,} entries, "
            f"{len(snapshot.sessions):,} sessions"
        )

    def snapshot(self) -> LibrarySnapshot:
        """Current state of the stores"""
        return LibrarySnapshot(
            entries=self.catalog.find_all_catalog_entries(),
            sessions=list(self.sessions.sessions.values()),
            progress=list(self.sessions.progress.values()),
        )

    def save(self) -> None:
        """Write the stores back to the library file"""
        with open(self.path, "w", encoding="utf-8") as f:
            json_dump(self.snapshot().model_dump(mode="json"), f, indent=2)
        logger.info(f"Saved library to {self.path}")
