# reading_import/infrastructure/logging/__init__.py

"""Logging infrastructure for the reading import engine.

This module provides centralized logging configuration and setup.
"""

# Local imports
from reading_import.infrastructure.logging._setup import get_default_log_path
from reading_import.infrastructure.logging._setup import log_import_summary
from reading_import.infrastructure.logging._setup import log_match_summary
from reading_import.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "get_default_log_path", "log_import_summary", "log_match_summary"]
