# reading_import/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import exists

# Local imports
from reading_import.application.models.execution_summary import ExecutionSummary
from reading_import.application.models.match_summary import MatchSummary


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp"""
    if not exists(log_dir):
        makedirs(log_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/reading_import_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
    log_dir: str = "logs",
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging
        log_dir: Directory for auto-generated log files

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path(log_dir)

        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        logger = getLogger(__name__)
        logger.info(f"Logging to file: {log_file}")

        return log_file

    return None


def log_match_summary(file_name: str, summary: MatchSummary) -> None:
    """Log the outcome of matching an uploaded export"""
    logger = getLogger(__name__)

    total = summary.total_records
    matched_pct = summary.matched / total * 100 if total else 0.0

    summary_lines = [
        "\n" + "=" * 80,
        f"MATCHING COMPLETE: {file_name}",
        "=" * 80,
        f"Total records: {total:,}",
        f"  Matched: {summary.matched:,} ({matched_pct:.1f}%)",
        f"  Unmatched: {summary.unmatched:,}",
        "",
        "Confidence:",
        f"  Exact: {summary.exact_matches:,}",
        f"  High: {summary.high_confidence:,}",
        f"  Medium: {summary.medium_confidence:,}",
        f"  Low: {summary.low_confidence:,}",
        "=" * 80,
    ]
    logger.info("\n".join(summary_lines))


def log_import_summary(
    summary: ExecutionSummary,
    start_time: float,
    end_time: float,
    log_file: str | None = None,
) -> None:
    """Log final import summary with statistics

    Args:
        summary: Totals from the import executor
        start_time: Processing start time
        end_time: Processing end time
        log_file: Path to log file (if any)
    """
    logger = getLogger(__name__)

    processing_time = end_time - start_time
    minutes = int(processing_time // 60)
    seconds = int(processing_time % 60)

    summary_lines = [
        "\n" + "=" * 80,
        "IMPORT COMPLETE",
        "=" * 80,
        f"Total records processed: {summary.total_records:,}",
        f"Processing time: {minutes}m {seconds}s",
        "",
        "Sessions:",
        f"  Created: {summary.sessions_created:,}",
        f"  Skipped: {summary.sessions_skipped:,}",
        f"    Duplicates: {summary.duplicates_found:,}",
        f"    Other: {summary.other_skipped:,}",
        "",
        "Side effects:",
        f"  Ratings updated: {summary.ratings_updated:,}",
        f"  Rating sync failures: {summary.rating_sync_failures:,}",
        f"  Progress entries backfilled: {summary.progress_logs_created:,}",
    ]

    if summary.errors:
        summary_lines.append(f"  Errors: {len(summary.errors):,}")

    if log_file:
        summary_lines.extend(["", "Output:", f"  Log: {log_file}"])

    summary_lines.append("=" * 80)
    logger.info("\n".join(summary_lines))
