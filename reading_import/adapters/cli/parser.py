# reading_import/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import Provider

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _add_common_arguments(parser: ArgumentParser) -> None:
    """Arguments shared by every subcommand"""
    parser.add_argument("csv_file", help="Goodreads or TheStoryGraph CSV export")
    parser.add_argument(
        "--library", "-l", required=True, help="Library JSON file holding catalog and sessions"
    )
    parser.add_argument(
        "--provider",
        choices=[provider.value for provider in Provider],
        default=None,
        help="Export format (default: detected from the CSV headers)",
    )
    parser.add_argument(
        "--json",
        dest="json_file",
        default=None,
        help="Also write the report to this JSON file",
    )

    # Configuration and logging
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Console log level (default: INFO, DEBUG when enabled in config)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: logs/reading_import_[timestamp].log)",
    )
    # File logging is enabled by default, so use store_true to disable it
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")
    parser.add_argument("--silent", action="store_true", help="Suppress all console output")


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    parser = ArgumentParser(
        prog="reading-import",
        description="Import Goodreads and TheStoryGraph reading history into a library",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    preview = subparsers.add_parser("preview", help="Match an export and show what would happen")
    _add_common_arguments(preview)
    preview.add_argument(
        "--confidence",
        nargs="+",
        choices=[confidence.value for confidence in MatchConfidence],
        default=None,
        help="Only show results in these confidence tiers",
    )
    preview.add_argument(
        "--limit", type=int, default=None, help="Preview page size (default: from config)"
    )
    preview.add_argument("--offset", type=int, default=0, help="First result to show")

    import_parser = subparsers.add_parser(
        "import", help="Match an export and create reading sessions"
    )
    _add_common_arguments(import_parser)
    # Duplicates are skipped by default, so use store_true to import them anyway
    import_parser.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Create sessions even when an identical session already exists",
    )
    import_parser.add_argument(
        "--unmatched-csv",
        default=None,
        help="Write records that matched no library entry to this CSV file",
    )
    import_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Run the import without saving the library file",
    )

    return parser
