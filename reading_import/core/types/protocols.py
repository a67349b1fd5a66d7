# reading_import/core/types/protocols.py

"""Protocol definitions for the collaborators the engine consumes."""

# Standard library imports
from datetime import date
from datetime import datetime
from typing import Protocol

# Local imports
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import SessionStatus
from reading_import.core.domain.reading_session import ProgressEntry
from reading_import.core.domain.reading_session import ReadingSession
from reading_import.core.domain.reading_session import SessionDates

# ============================================================================
# Time Protocols
# ============================================================================


class Clock(Protocol):
    """Monotonic seconds source, injected into TTL caches."""

    def __call__(self) -> float: ...


class WallClock(Protocol):
    """Current wall-clock time, injected into the executor."""

    def __call__(self) -> datetime: ...


# ============================================================================
# Catalog Protocols
# ============================================================================


class CatalogReader(Protocol):
    """Read interface over the library catalog."""

    def find_all_catalog_entries(self) -> list[CatalogEntry]: ...
    def find_entry_by_identifier(self, normalized_isbn: str) -> CatalogEntry | None: ...
    def find_entries_by_ids(self, ids: list[int]) -> list[CatalogEntry]: ...


# ============================================================================
# Session Protocols
# ============================================================================


class SessionStore(Protocol):
    """Session collaborator owning session legality and persistence."""

    def find_active_session(self, entry_id: int) -> ReadingSession | None: ...
    def find_duplicate_session(
        self,
        entry_id: int,
        status: SessionStatus,
        completed_date: date | None,
        rating: int | None,
    ) -> ReadingSession | None: ...
    def archive_session(self, session_id: int) -> None: ...
    def create_session(
        self,
        entry_id: int,
        session_number: int,
        status: SessionStatus,
        dates: SessionDates,
        review: str | None,
        is_active: bool,
    ) -> ReadingSession: ...
    def get_next_session_number(self, entry_id: int) -> int: ...
    def has_progress(self, session_id: int) -> bool: ...
    def create_progress_entry(
        self,
        entry_id: int,
        session_id: int,
        page: int,
        percentage: float,
        progress_date: date,
        note: str | None,
    ) -> ProgressEntry: ...
    def update_entry_rating(self, entry_id: int, rating: int) -> None: ...
