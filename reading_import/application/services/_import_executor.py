# reading_import/application/services/_import_executor.py

"""Turns match results into reading sessions and progress entries"""

# Standard library imports
from datetime import date
from datetime import datetime
from logging import getLogger

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from reading_import.application.models.execution_summary import ExecutionSummary
from reading_import.application.models.execution_summary import RecordAction
from reading_import.application.models.execution_summary import RecordOutcome
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import ReadingStatus
from reading_import.core.domain.enums import SessionStatus
from reading_import.core.domain.import_record import ImportRecord
from reading_import.core.domain.match_result import MatchResult
from reading_import.core.domain.reading_session import ReadingSession
from reading_import.core.domain.reading_session import SessionDates
from reading_import.core.types.protocols import SessionStore
from reading_import.core.types.protocols import WallClock
from reading_import.core.types.results import SideEffectResult
from reading_import.infrastructure.config import ConfigLoader
from reading_import.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)

SESSION_STATUSES = {
    ReadingStatus.READ: SessionStatus.READ,
    ReadingStatus.CURRENTLY_READING: SessionStatus.READING,
    ReadingStatus.TO_READ: SessionStatus.TO_READ,
    ReadingStatus.PAUSED: SessionStatus.TO_READ,
}


def map_session_status(status: ReadingStatus) -> SessionStatus:
    """Session lifecycle status for an import status

    Raises:
        ValueError: For did-not-finish, which never produces a session
    """
    try:
        return SESSION_STATUSES[status]
    except KeyError:
        raise ValueError(f"Status {status.value} does not map to a session") from None


def derive_session_dates(
    record: ImportRecord, status: SessionStatus, today: date
) -> SessionDates:
    """Start and completion dates of the session created for a record

    - read: the record's dates as given
    - reading: started, else completed, else today; never completed
    - to-read: no dates
    """
    match status:
        case SessionStatus.READ:
            return SessionDates(
                started_date=record.started_date, completed_date=record.completed_date
            )
        case SessionStatus.READING:
            started = record.started_date or record.completed_date or today
            return SessionDates(started_date=started)
        case SessionStatus.TO_READ:
            return SessionDates()


class ReReadResult(BaseModel):
    """Sessions created by the re-read path"""

    model_config = ConfigDict()

    entry_id: int
    session_ids: list[int] = Field(default_factory=list)
    rating: SideEffectResult | None = None
    progress: list[SideEffectResult] = Field(default_factory=list)


class ImportExecutor(ConfigurableMixin):
    """Creates sessions for matched records through the session collaborator

    Every record is an independent unit: a failure is recorded in the
    summary and the next record is attempted. Nothing is rolled back, and
    duplicate detection makes re-running an import safe.
    """

    def __init__(
        self,
        session_store: SessionStore,
        config: ConfigLoader | None = None,
        clock: WallClock = datetime.now,
    ):
        """Initialize the executor

        Args:
            session_store: Session collaborator
            config: Configuration loader
            clock: Wall clock used for "now" dates
        """
        self.config = self._init_config(config)
        self.session_store = session_store
        self.clock = clock
        self.progress_note = self.config.imports.progress_note

    def import_sessions(
        self, matches: list[MatchResult], skip_duplicates: bool | None = None
    ) -> ExecutionSummary:
        """Create sessions for a list of match results

        Args:
            matches: Match results, matched and unmatched
            skip_duplicates: Skip records with an identical existing session,
                defaults to the configured value

        Returns:
            Totals and per-record outcomes
        """
        if skip_duplicates is None:
            skip_duplicates = self.config.imports.skip_duplicates

        summary = ExecutionSummary(total_records=len(matches))
        created: list[tuple[ReadingSession, int | None]] = []

        logger.info(
            f"Starting session import for {len(matches):,} records "
            f"(skip duplicates: {skip_duplicates})"
        )

        for match in matches:
            record = match.import_record
            entry = match.matched_book

            if entry is None:
                self._record_skip(summary, record, None, "No matching book in library")
                continue

            try:
                outcome, session = self._import_single(record, entry, skip_duplicates)
            except Exception as e:
                logger.error(
                    f"Failed to import row {record.row_number} "
                    f"('{record.title}' -> entry {entry.id}): {e}"
                )
                summary.record_error(record.row_number, e)
                summary.outcomes.append(
                    RecordOutcome(
                        row_number=record.row_number,
                        entry_id=entry.id,
                        book_title=entry.title,
                        action=RecordAction.FAILED,
                        reason=str(e),
                    )
                )
                continue

            summary.outcomes.append(outcome)
            if outcome.action is RecordAction.CREATED and session is not None:
                summary.increment("sessions_created")
                created.append((session, entry.total_pages))
            else:
                summary.increment("sessions_skipped")
                if outcome.is_duplicate:
                    summary.increment("duplicates_found")

        for result in self.sync_ratings(matches):
            summary.increment("ratings_updated" if result.ok else "rating_sync_failures")

        for result in self.backfill_progress(created):
            if result.ok:
                summary.increment("progress_logs_created")
            else:
                summary.increment("progress_backfill_failures")
                logger.warning(
                    f"Progress backfill failed for entry {result.entry_id}: {result.error}"
                )

        logger.info(
            f"Session import complete: {summary.sessions_created} created, "
            f"{summary.sessions_skipped} skipped ({summary.duplicates_found} duplicates), "
            f"{len(summary.errors)} errors"
        )
        return summary

    def _record_skip(
        self,
        summary: ExecutionSummary,
        record: ImportRecord,
        entry: CatalogEntry | None,
        reason: str,
    ) -> None:
        summary.increment("sessions_skipped")
        summary.outcomes.append(
            RecordOutcome(
                row_number=record.row_number,
                entry_id=entry.id if entry else None,
                book_title=entry.title if entry else record.title,
                action=RecordAction.SKIPPED,
                reason=reason,
            )
        )

    def _import_single(
        self, record: ImportRecord, entry: CatalogEntry, skip_duplicates: bool
    ) -> tuple[RecordOutcome, ReadingSession | None]:
        """Create the session for one matched record"""
        if record.status is ReadingStatus.DID_NOT_FINISH:
            return (
                RecordOutcome(
                    row_number=record.row_number,
                    entry_id=entry.id,
                    book_title=entry.title,
                    action=RecordAction.SKIPPED,
                    reason="Did not finish",
                ),
                None,
            )

        status = map_session_status(record.status)
        dates = derive_session_dates(record, status, self.clock().date())

        if skip_duplicates:
            duplicate = self.session_store.find_duplicate_session(
                entry.id, status, dates.completed_date, record.rating
            )
            if duplicate is not None:
                logger.debug(
                    f"Row {record.row_number}: duplicate of session {duplicate.id}, skipping"
                )
                return (
                    RecordOutcome(
                        row_number=record.row_number,
                        entry_id=entry.id,
                        book_title=entry.title,
                        action=RecordAction.SKIPPED,
                        reason="Duplicate session exists",
                        session_id=duplicate.id,
                        is_duplicate=True,
                    ),
                    None,
                )

        if status in (SessionStatus.READ, SessionStatus.READING):
            active = self.session_store.find_active_session(entry.id)
            if active is not None:
                self.session_store.archive_session(active.id)
                logger.debug(f"Archived active session {active.id} of entry {entry.id}")

        session_number = self.session_store.get_next_session_number(entry.id)
        session = self.session_store.create_session(
            entry.id,
            session_number,
            status,
            dates,
            record.review,
            is_active=status is not SessionStatus.READ,
        )
        logger.debug(
            f"Created session {session.id} (#{session_number}, {status.value}) for entry {entry.id}"
        )

        return (
            RecordOutcome(
                row_number=record.row_number,
                entry_id=entry.id,
                book_title=entry.title,
                action=RecordAction.CREATED,
                reason="Session created successfully",
                session_id=session.id,
            ),
            session,
        )

    # Best-effort side calls

    def update_rating(self, entry_id: int, rating: int) -> SideEffectResult:
        """Write a rating, capturing any failure"""
        try:
            self.session_store.update_entry_rating(entry_id, rating)
        except Exception as e:
            logger.warning(f"Failed to update rating of entry {entry_id}: {e}")
            return SideEffectResult.failure(entry_id, e)
        return SideEffectResult.success(entry_id)

    def sync_ratings(self, matches: list[MatchResult]) -> list[SideEffectResult]:
        """Apply the rating of every matched, rated record"""
        return [
            self.update_rating(match.matched_book.id, match.import_record.rating)
            for match in matches
            if match.matched_book is not None and match.import_record.rating
        ]

    def create_completion_progress(
        self, session: ReadingSession, total_pages: int | None = None
    ) -> SideEffectResult:
        """Add a 100% progress entry to a read session"""
        try:
            self.session_store.create_progress_entry(
                session.entry_id,
                session.id,
                total_pages or 0,
                100.0,
                session.completed_date or session.created_at.date(),
                self.progress_note,
            )
        except Exception as e:
            return SideEffectResult.failure(session.entry_id, e)
        return SideEffectResult.success(session.entry_id)

    def backfill_progress(
        self, sessions: list[tuple[ReadingSession, int | None]]
    ) -> list[SideEffectResult]:
        """Backfill completion progress for new read sessions without progress

        Args:
            sessions: Created sessions paired with the total pages of their entry
        """
        results: list[SideEffectResult] = []
        for session, total_pages in sessions:
            if session.status is not SessionStatus.READ:
                continue
            if self.session_store.has_progress(session.id):
                continue
            results.append(self.create_completion_progress(session, total_pages))
        return results

    # Re-reads

    def handle_re_reads(
        self,
        entry_id: int,
        completed_dates: list[date | None],
        rating: int | None = None,
        review: str | None = None,
        total_pages: int | None = None,
    ) -> ReReadResult:
        """Create one archived read session per completion date

        Dates are processed oldest first so session numbers follow reading
        order. Missing dates are ignored.

        Args:
            entry_id: Catalog entry that was read several times
            completed_dates: Completion date of each read
            rating: Rating to apply to the entry
            review: Review attached to every created session
            total_pages: Page count used for backfilled progress

        Returns:
            Created session ids and side-effect results
        """
        result = ReReadResult(entry_id=entry_id)
        created: list[tuple[ReadingSession, int | None]] = []

        for completed in sorted(d for d in completed_dates if d is not None):
            session_number = self.session_store.get_next_session_number(entry_id)
            session = self.session_store.create_session(
                entry_id,
                session_number,
                SessionStatus.READ,
                SessionDates(started_date=completed, completed_date=completed),
                review,
                is_active=False,
            )
            result.session_ids.append(session.id)
            created.append((session, total_pages))
            logger.debug(
                f"Created re-read session {session.id} (#{session_number}) "
                f"for entry {entry_id} completed {completed}"
            )

        if rating:
            result.rating = self.update_rating(entry_id, rating)
        result.progress = self.backfill_progress(created)

        logger.info(f"Created {len(result.session_ids)} re-read sessions for entry {entry_id}")
        return result
