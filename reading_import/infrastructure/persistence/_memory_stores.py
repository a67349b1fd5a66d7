# reading_import/infrastructure/persistence/_memory_stores.py

"""In-memory catalog and session stores"""

# Standard library imports
from datetime import date
from datetime import datetime
from logging import getLogger

# Local imports
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import SessionStatus
from reading_import.core.domain.reading_session import ProgressEntry
from reading_import.core.domain.reading_session import ReadingSession
from reading_import.core.domain.reading_session import SessionDates
from reading_import.core.types.protocols import WallClock
from reading_import.shared.utils.isbn_utils import normalize_isbn

logger = getLogger(__name__)


class InMemoryCatalog:
    """Catalog read interface over a list of entries"""

    def __init__(self, entries: list[CatalogEntry] | None = None) -> None:
        self._entries: dict[int, CatalogEntry] = {entry.id: entry for entry in entries or []}

    def add(self, entry: CatalogEntry) -> None:
        """Add or replace an entry"""
        self._entries[entry.id] = entry

    def find_all_catalog_entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def find_entry_by_identifier(self, normalized_isbn: str) -> CatalogEntry | None:
        for entry in self._entries.values():
            if normalize_isbn(entry.isbn) == normalized_isbn:
                return entry
        return None

    def find_entries_by_ids(self, ids: list[int]) -> list[CatalogEntry]:
        return [self._entries[entry_id] for entry_id in ids if entry_id in self._entries]

    def get(self, entry_id: int) -> CatalogEntry | None:
        """Entry by id"""
        return self._entries.get(entry_id)

    def set_rating(self, entry_id: int, rating: int) -> None:
        """Replace an entry with a copy carrying the new rating

        Raises:
            KeyError: If the entry does not exist
        """
        entry = self._entries[entry_id]
        self._entries[entry_id] = entry.model_copy(update={"rating": rating})


class InMemorySessionStore:
    """Session collaborator keeping sessions and progress in dictionaries

    Ratings are written through to the catalog so duplicate checks see them.
    """

    def __init__(
        self,
        catalog: InMemoryCatalog,
        sessions: list[ReadingSession] | None = None,
        progress: list[ProgressEntry] | None = None,
        clock: WallClock = datetime.now,
    ) -> None:
        """Initialize the store

        Args:
            catalog: Catalog owning entry ratings
            sessions: Existing sessions
            progress: Existing progress entries
            clock: Source of creation timestamps
        """
        self.catalog = catalog
        self.clock = clock
        self.sessions: dict[int, ReadingSession] = {s.id: s for s in sessions or []}
        self.progress: dict[int, ProgressEntry] = {p.id: p for p in progress or []}
        self._next_session_id = max(self.sessions, default=0) + 1
        self._next_progress_id = max(self.progress, default=0) + 1

    def sessions_for(self, entry_id: int) -> list[ReadingSession]:
        """Sessions of an entry ordered by session number"""
        return sorted(
            (s for s in self.sessions.values() if s.entry_id == entry_id),
            key=lambda s: s.session_number,
        )

    def find_active_session(self, entry_id: int) -> ReadingSession | None:
        for session in self.sessions_for(entry_id):
            if session.is_active:
                return session
        return None

    def find_duplicate_session(
        self,
        entry_id: int,
        status: SessionStatus,
        completed_date: date | None,
        rating: int | None,
    ) -> ReadingSession | None:
        entry = self.catalog.get(entry_id)
        entry_rating = entry.rating if entry is not None else None

        # A rating only rules out a duplicate when both sides have one
        if rating is not None and entry_rating is not None and rating != entry_rating:
            return None

        for session in self.sessions_for(entry_id):
            if session.status is status and session.completed_date == completed_date:
                return session
        return None

    def archive_session(self, session_id: int) -> None:
        session = self.sessions[session_id]
        self.sessions[session_id] = session.model_copy(update={"is_active": False})
        logger.debug(f"Archived session {session_id} of entry {session.entry_id}")

    def create_session(
        self,
        entry_id: int,
        session_number: int,
        status: SessionStatus,
        dates: SessionDates,
        review: str | None,
        is_active: bool,
    ) -> ReadingSession:
        session = ReadingSession(
            id=self._next_session_id,
            entry_id=entry_id,
            session_number=session_number,
            status=status,
            started_date=dates.started_date,
            completed_date=dates.completed_date,
            review=review,
            is_active=is_active,
            created_at=self.clock(),
        )
        self.sessions[session.id] = session
        self._next_session_id += 1
        return session

    def get_next_session_number(self, entry_id: int) -> int:
        existing = self.sessions_for(entry_id)
        return existing[-1].session_number + 1 if existing else 1

    def has_progress(self, session_id: int) -> bool:
        return any(p.session_id == session_id for p in self.progress.values())

    def create_progress_entry(
        self,
        entry_id: int,
        session_id: int,
        page: int,
        percentage: float,
        progress_date: date,
        note: str | None,
    ) -> ProgressEntry:
        entry = ProgressEntry(
            id=self._next_progress_id,
            entry_id=entry_id,
            session_id=session_id,
            current_page=page,
            percentage=percentage,
            progress_date=progress_date,
            note=note,
        )
        self.progress[entry.id] = entry
        self._next_progress_id += 1
        return entry

    def update_entry_rating(self, entry_id: int, rating: int) -> None:
        self.catalog.set_rating(entry_id, rating)
