# reading_import/infrastructure/cache/_import_batch_cache.py

"""Time-boxed in-memory cache of scored import batches"""

# Standard library imports
from logging import getLogger
from threading import Event
from threading import Lock
from threading import Thread
from time import monotonic
from uuid import uuid4

# Local imports
from reading_import.application.models.import_batch import CachedImportBatch
from reading_import.core.types.protocols import Clock

logger = getLogger(__name__)

DEFAULT_TTL_SECONDS = 30 * 60
DEFAULT_SWEEP_INTERVAL_SECONDS = 5 * 60


class ImportBatchCache:
    """Holds import batches between scoring and execution

    Readers cannot tell a missing batch from an expired one: both come back
    as None. Nothing is persisted, so a restart loses unexecuted imports.
    Operations on distinct import ids never interact; callers serialize
    access to a single import id themselves.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Clock = monotonic,
        sweep_interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
    ) -> None:
        """Initialize the cache

        Args:
            ttl_seconds: Lifetime of a batch from the time it is stored
            clock: Monotonic seconds source
            sweep_interval_seconds: Period of the background sweep
        """
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.sweep_interval_seconds = sweep_interval_seconds

        self._entries: dict[str, tuple[float, CachedImportBatch]] = {}
        self._lock = Lock()
        self._stop_event: Event | None = None
        self._sweeper: Thread | None = None

    @staticmethod
    def new_import_id() -> str:
        """Opaque identifier for a new batch"""
        return uuid4().hex

    def put(self, batch: CachedImportBatch) -> str:
        """Store a batch under its import id, replacing any previous one"""
        with self._lock:
            self._entries[batch.import_id] = (self.clock() + self.ttl_seconds, batch)
        logger.debug(f"Cached import {batch.import_id} ({len(batch.match_results):,} results)")
        return batch.import_id

    def get(self, import_id: str) -> CachedImportBatch | None:
        """Batch for an import id, None if it is missing or expired"""
        with self._lock:
            item = self._entries.get(import_id)
            if item is None:
                return None

            expires_at, batch = item
            if self.clock() >= expires_at:
                del self._entries[import_id]
                logger.info(f"Import {import_id} expired")
                return None
            return batch

    def delete(self, import_id: str) -> bool:
        """Remove a batch, True if one was stored"""
        with self._lock:
            return self._entries.pop(import_id, None) is not None

    def sweep(self) -> int:
        """Evict every expired batch

        Returns:
            Number of batches evicted
        """
        now = self.clock()
        with self._lock:
            expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.info(f"Evicted {len(expired)} expired import batches")
        return len(expired)

    def clear(self) -> None:
        """Drop every batch"""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, import_id: object) -> bool:
        return isinstance(import_id, str) and self.get(import_id) is not None

    # Background sweep

    def start_sweeper(self) -> None:
        """Run sweep() periodically on a daemon thread"""
        if self._sweeper is not None and self._sweeper.is_alive():
            return

        self._stop_event = Event()
        self._sweeper = Thread(
            target=self._sweep_loop,
            args=(self._stop_event,),
            name="import-batch-cache-sweeper",
            daemon=True,
        )
        self._sweeper.start()

    def stop_sweeper(self) -> None:
        """Stop the background sweep and wait for the thread to exit"""
        if self._stop_event is not None:
            self._stop_event.set()
        if self._sweeper is not None:
            self._sweeper.join()
        self._sweeper = None
        self._stop_event = None

    def _sweep_loop(self, stop_event: Event) -> None:
        while not stop_event.wait(self.sweep_interval_seconds):
            self.sweep()
