# reading_import/application/services/_import_service.py

"""Upload, preview and execute workflow over the import batch cache"""

# Standard library imports
from datetime import datetime
from logging import getLogger
from os.path import basename
from os.path import getsize
from os.path import splitext
from time import time

# Local imports
from reading_import.application.models.execution_summary import ExecutionSummary
from reading_import.application.models.import_batch import CachedImportBatch
from reading_import.application.models.import_batch import ExecutionOutcome
from reading_import.application.models.import_batch import UnmatchedRecord
from reading_import.application.models.import_batch import UploadOutcome
from reading_import.application.models.match_summary import MatchSummary
from reading_import.application.models.preview import PreviewPage
from reading_import.application.processing.matching import LibraryMatcher
from reading_import.application.processing.normalizers import RecordNormalizer
from reading_import.application.processing.normalizers import detect_provider
from reading_import.application.services._import_executor import ImportExecutor
from reading_import.application.services._preview_service import PreviewService
from reading_import.core.domain.enums import ImportStatus
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.core.domain.errors import ImportExpired
from reading_import.core.domain.errors import StructuralError
from reading_import.core.domain.errors import UploadRejected
from reading_import.core.domain.match_result import MatchResult
from reading_import.core.types.protocols import CatalogReader
from reading_import.core.types.protocols import SessionStore
from reading_import.core.types.protocols import WallClock
from reading_import.infrastructure.cache import ImportBatchCache
from reading_import.infrastructure.config import ConfigLoader
from reading_import.infrastructure.persistence import read_csv_table
from reading_import.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class ImportService(ConfigurableMixin):
    """Coordinates the two-step import of a reading-history export

    ``upload`` normalizes and matches a file and caches the result under a
    new import id. ``execute`` turns a cached batch into sessions and drops
    it from the cache. Callers must serialize operations on the same id.
    """

    def __init__(
        self,
        catalog: CatalogReader,
        session_store: SessionStore,
        config: ConfigLoader | None = None,
        batch_cache: ImportBatchCache | None = None,
        clock: WallClock = datetime.now,
    ):
        """Initialize the service and its components

        Args:
            catalog: Catalog read interface
            session_store: Session collaborator
            config: Configuration loader
            batch_cache: Cache holding batches between upload and execution
            clock: Wall clock for batch timestamps and derived session dates
        """
        self.config = self._init_config(config)
        self.catalog = catalog
        self.session_store = session_store
        self.clock = clock

        self.batch_cache = batch_cache or ImportBatchCache(
            ttl_seconds=self.config.cache.ttl_seconds,
            sweep_interval_seconds=self.config.cache.sweep_interval_seconds,
        )
        self.normalizer = RecordNormalizer()
        self.matcher = LibraryMatcher(catalog, self.config)
        self.executor = ImportExecutor(session_store, self.config, clock)
        self.preview_service = PreviewService(session_store, self.config, clock)

    # Upload

    def check_upload(self, file_name: str, size_bytes: int) -> None:
        """Reject files that are too large or have the wrong extension

        Raises:
            UploadRejected: If the file may not be imported
        """
        max_size = self.config.imports.max_file_size_bytes
        if size_bytes > max_size:
            raise UploadRejected(
                f"File too large: {size_bytes:,} bytes exceeds the limit of {max_size:,} bytes",
                details={"size_bytes": size_bytes, "max_size_bytes": max_size},
            )

        extension = splitext(file_name)[1].lower()
        allowed = self.config.imports.allowed_extensions
        if extension not in allowed:
            raise UploadRejected(
                f"Invalid file type '{extension or file_name}': expected {', '.join(allowed)}",
                details={"file_name": file_name},
            )

    def upload(
        self, csv_text: str, file_name: str, provider: Provider | None = None
    ) -> UploadOutcome:
        """Normalize, match and cache an export

        Args:
            csv_text: Contents of the export
            file_name: Original file name, used for the extension check
            provider: Export format, detected from the headers when omitted

        Returns:
            Import id plus parse and match counts

        Raises:
            UploadRejected: File too large or not a CSV
            StructuralError: Unreadable table, unknown format or missing columns
        """
        self.check_upload(file_name, len(csv_text.encode("utf-8")))

        table = read_csv_table(csv_text)
        if provider is None:
            provider = detect_provider(table.headers)
            if provider is None:
                raise StructuralError(
                    "Could not detect the export format from the CSV headers; "
                    "choose goodreads or storygraph explicitly"
                )
            logger.info(f"Detected {provider.display_name} export in {file_name}")

        parse_result = self.normalizer.normalize(table.rows, provider, table.headers)

        try:
            match_results = self.matcher.match_batch(parse_result.records)
        finally:
            self.matcher.clear_cache()

        batch = CachedImportBatch(
            import_id=self.batch_cache.new_import_id(),
            provider=provider,
            file_name=file_name,
            records=parse_result.records,
            match_results=match_results,
            parse_errors=parse_result.errors,
            created_at=self.clock(),
        )
        import_id = self.batch_cache.put(batch)

        logger.info(
            f"Cached import {import_id} from {file_name}: "
            f"{parse_result.valid_rows:,}/{parse_result.total_rows:,} rows valid"
        )

        return UploadOutcome(
            import_id=import_id,
            provider=provider,
            file_name=file_name,
            total_rows=parse_result.total_rows,
            valid_rows=parse_result.valid_rows,
            invalid_rows=len(parse_result.errors),
            skipped_rows=len(parse_result.skipped),
            match_summary=MatchSummary.from_results(match_results),
            errors=parse_result.errors,
            warnings=parse_result.warnings,
        )

    def upload_file(self, path: str, provider: Provider | None = None) -> UploadOutcome:
        """Upload an export from disk

        The size check runs before the file is read.

        Raises:
            UploadRejected: File too large or not a CSV
            StructuralError: Unreadable table, unknown format or missing columns
        """
        file_name = basename(path)
        self.check_upload(file_name, getsize(path))

        with open(path, encoding="utf-8-sig", newline="") as f:
            csv_text = f.read()
        return self.upload(csv_text, file_name, provider)

    # Preview

    def get_batch(self, import_id: str) -> CachedImportBatch:
        """Cached batch for an import id

        Raises:
            ImportExpired: If the batch is missing or expired
        """
        batch = self.batch_cache.get(import_id)
        if batch is None:
            logger.warning(f"Import {import_id} not found in cache")
            raise ImportExpired(import_id)
        return batch

    def get_preview(
        self,
        import_id: str,
        confidence: list[MatchConfidence] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> PreviewPage:
        """Preview page for a cached import

        Raises:
            ImportExpired: If the batch is missing or expired
        """
        batch = self.get_batch(import_id)
        return self.preview_service.build_preview(batch, confidence, offset, limit)

    # Execution

    def execute(self, import_id: str, skip_duplicates: bool | None = None) -> ExecutionOutcome:
        """Create sessions for a cached import and discard the batch

        Matched records are executed in chunks of the configured batch size.

        Args:
            import_id: Id returned by ``upload``
            skip_duplicates: Skip records with an identical existing session,
                defaults to the configured value

        Returns:
            Status, merged execution summary and unmatched records

        Raises:
            ImportExpired: If the batch is missing or expired
        """
        start_time = time()
        batch = self.get_batch(import_id)

        matched = [result for result in batch.match_results if result.is_matched]
        unmatched = [result for result in batch.match_results if not result.is_matched]
        logger.info(
            f"Executing import {import_id}: {len(matched):,} matched, "
            f"{len(unmatched):,} unmatched"
        )

        summary = ExecutionSummary()
        batch_size = self.config.imports.batch_size
        for start in range(0, len(matched), batch_size):
            chunk = matched[start : start + batch_size]
            logger.debug(f"Processing records {start + 1}-{start + len(chunk)} of {len(matched)}")
            summary.merge(self.executor.import_sessions(chunk, skip_duplicates))

        status = ImportStatus.PARTIAL if summary.errors else ImportStatus.SUCCESS
        self.batch_cache.delete(import_id)

        outcome = ExecutionOutcome(
            import_id=import_id,
            status=status,
            summary=summary,
            unmatched_records=[self._unmatched_record(result) for result in unmatched],
            duration_seconds=time() - start_time,
        )
        logger.info(
            f"Import {import_id} finished with status {status.value} "
            f"in {outcome.duration_seconds:.2f}s"
        )
        return outcome

    @staticmethod
    def _unmatched_record(result: MatchResult) -> UnmatchedRecord:
        record = result.import_record
        return UnmatchedRecord(
            row_number=record.row_number,
            title=record.title,
            authors=record.authors,
            isbn=record.best_isbn,
            reason=result.unmatched_reason or UnmatchedReason.NO_TITLE_MATCH,
            confidence_score=result.confidence_score,
        )
