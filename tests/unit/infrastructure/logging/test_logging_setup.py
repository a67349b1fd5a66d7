# tests/unit/infrastructure/logging/test_logging_setup.py

"""Tests for logging configuration and summaries"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import StreamHandler
from logging import getLogger
from os.path import exists

# Local imports
from reading_import.application.models.execution_summary import ExecutionSummary
from reading_import.application.models.match_summary import MatchSummary
from reading_import.infrastructure.logging import get_default_log_path
from reading_import.infrastructure.logging import log_import_summary
from reading_import.infrastructure.logging import log_match_summary
from reading_import.infrastructure.logging import setup_logging


class TestSetupLogging:
    """Test handler configuration"""

    def test_console_only(self):
        assert setup_logging(disable_file_logging=True) is None
        handlers = getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], StreamHandler)
        assert getLogger().level == INFO

    def test_silent_with_file(self, tmp_path):
        log_file = str(tmp_path / "run.log")
        assert setup_logging(log_file=log_file, silent=True, log_level="debug") == log_file
        handlers = getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], FileHandler)
        assert getLogger().level == DEBUG

    def test_unknown_level_defaults_to_info(self):
        setup_logging(log_level="chatty", disable_file_logging=True)
        assert getLogger().level == INFO

    def test_default_log_path(self, tmp_path):
        log_dir = str(tmp_path / "logs")
        path = get_default_log_path(log_dir)
        assert exists(log_dir)
        assert path.startswith(f"{log_dir}/reading_import_")
        assert path.endswith(".log")


class TestSummaries:
    """Test summary log output"""

    def test_match_summary(self, caplog):
        caplog.set_level(INFO)
        summary = MatchSummary(total_records=4, exact_matches=3, unmatched=1)
        log_match_summary("export.csv", summary)
        assert "MATCHING COMPLETE: export.csv" in caplog.text
        assert "Matched: 3 (75.0%)" in caplog.text

    def test_import_summary(self, caplog):
        caplog.set_level(INFO)
        summary = ExecutionSummary(total_records=2, sessions_created=1, sessions_skipped=1)
        summary.record_error(2, "boom")
        log_import_summary(summary, 0.0, 75.0, log_file="run.log")
        assert "Processing time: 1m 15s" in caplog.text
        assert "Errors: 1" in caplog.text
        assert "Log: run.log" in caplog.text
