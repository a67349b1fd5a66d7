# reading_import/infrastructure/config/__init__.py

"""Configuration infrastructure for the reading import engine.

This module manages configuration loading, validation, and models.
"""

# Local imports
from reading_import.infrastructure.config._loader import ConfigLoader
from reading_import.infrastructure.config._loader import get_config
from reading_import.infrastructure.config._loader import reset_config
from reading_import.infrastructure.config._models import AppConfig
from reading_import.infrastructure.config._models import CacheConfig
from reading_import.infrastructure.config._models import ConfidenceBoundaries
from reading_import.infrastructure.config._models import ImportConfig
from reading_import.infrastructure.config._models import LoggingConfig
from reading_import.infrastructure.config._models import MatchingThresholds
from reading_import.infrastructure.config._models import SimilarityConfig

__all__ = [
    "AppConfig",
    "CacheConfig",
    "ConfidenceBoundaries",
    "ConfigLoader",
    "ImportConfig",
    "LoggingConfig",
    "MatchingThresholds",
    "SimilarityConfig",
    "get_config",
    "reset_config",
]
