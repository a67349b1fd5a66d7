# reading_import/adapters/cli/main.py

"""
Reading Import Tool - CLI Main Module

Command-line interface for importing Goodreads and TheStoryGraph
reading history into a library stored as a JSON file.
"""

# Standard library imports
from argparse import Namespace
from logging import getLogger
from time import time

# Local imports
from reading_import.adapters.cli.parser import create_argument_parser
from reading_import.adapters.exporters import save_execution_json
from reading_import.adapters.exporters import save_preview_json
from reading_import.adapters.exporters import save_unmatched_csv
from reading_import.application.models.preview import PreviewPage
from reading_import.application.services import ImportService
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.errors import ImportEngineError
from reading_import.infrastructure.config import ConfigLoader
from reading_import.infrastructure.config import get_config
from reading_import.infrastructure.logging import log_import_summary
from reading_import.infrastructure.logging import log_match_summary
from reading_import.infrastructure.logging import setup_logging
from reading_import.infrastructure.persistence import JsonLibraryStore

logger = getLogger(__name__)


def _log_preview_page(page: PreviewPage) -> None:
    for item in page.items:
        record = item.import_data
        target = (
            f"#{item.matched_book.id} '{item.matched_book.title}'"
            if item.matched_book
            else "no match"
        )
        line = (
            f"Row {item.row_number}: '{record.title}' -> {target} "
            f"[{item.confidence.value} {item.confidence_score}] {item.match_reason}"
        )
        if item.warnings:
            line += f" ({'; '.join(item.warnings)})"
        logger.info(line)

    pagination = page.pagination
    shown_to = pagination.offset + len(page.items)
    logger.info(
        f"Showing {pagination.offset + 1 if page.items else 0}-{shown_to} "
        f"of {pagination.total} results" + (" (more available)" if pagination.has_more else "")
    )


def run_preview(args: Namespace, service: ImportService, provider: Provider | None) -> None:
    """Upload an export and log one preview page"""
    upload = service.upload_file(args.csv_file, provider)
    log_match_summary(upload.file_name, upload.match_summary)

    confidence = [MatchConfidence(value) for value in args.confidence or []]
    page = service.get_preview(upload.import_id, confidence, args.offset, args.limit)
    _log_preview_page(page)

    if args.json_file:
        output_path = save_preview_json(page, args.json_file)
        logger.info(f"Preview written to {output_path}")


def run_import(
    args: Namespace,
    service: ImportService,
    store: JsonLibraryStore,
    provider: Provider | None,
    log_file: str | None,
) -> None:
    """Upload an export, execute it and save the library"""
    start_time = time()

    upload = service.upload_file(args.csv_file, provider)
    log_match_summary(upload.file_name, upload.match_summary)
    for error in upload.errors:
        logger.warning(f"Row {error.row_number} skipped: {error.error}")

    outcome = service.execute(upload.import_id, skip_duplicates=not args.allow_duplicates)
    log_import_summary(outcome.summary, start_time, time(), log_file)

    if args.dry_run:
        logger.info("Dry run: library file left unchanged")
    else:
        store.save()

    if args.json_file:
        output_path = save_execution_json(outcome, args.json_file)
        logger.info(f"Execution report written to {output_path}")

    if args.unmatched_csv:
        save_unmatched_csv(outcome.unmatched_records, args.unmatched_csv)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point

    Returns:
        Process exit status
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = ConfigLoader(args.config) if args.config else get_config()
    log_level = args.log_level or ("DEBUG" if config.logging.debug else "INFO")

    log_file = setup_logging(
        log_file=args.log_file or config.logging.log_file,
        log_level=log_level,
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
        log_dir=config.logging.log_dir,
    )

    provider = Provider(args.provider) if args.provider else None

    try:
        store = JsonLibraryStore(args.library)
        service = ImportService(store.catalog, store.sessions, config)

        if args.command == "preview":
            run_preview(args, service, provider)
        else:
            run_import(args, service, store, provider, log_file)
    except ImportEngineError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
