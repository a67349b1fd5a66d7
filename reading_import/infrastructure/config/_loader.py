# reading_import/infrastructure/config/_loader.py

"""Configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from reading_import.core.types.json import JSONDict
from reading_import.infrastructure.config._models import AppConfig
from reading_import.infrastructure.config._models import CacheConfig
from reading_import.infrastructure.config._models import ConfidenceBoundaries
from reading_import.infrastructure.config._models import ImportConfig
from reading_import.infrastructure.config._models import LoggingConfig
from reading_import.infrastructure.config._models import MatchingThresholds
from reading_import.infrastructure.config._models import SimilarityConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Facade over the validated application configuration"""

    def __init__(self, config_path: str | None = None, app_config: AppConfig | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
            app_config: Already built configuration, takes precedence over config_path
        """
        self.config_path = config_path
        self._app_config = app_config or AppConfig.load(config_path)

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def matching(self) -> MatchingThresholds:
        """Matcher thresholds and scores"""
        return self._app_config.matching

    @property
    def confidence(self) -> ConfidenceBoundaries:
        """Confidence tier boundaries"""
        return self._app_config.confidence

    @property
    def similarity(self) -> SimilarityConfig:
        """Title similarity weights"""
        return self._app_config.similarity

    @property
    def imports(self) -> ImportConfig:
        """Upload and execution settings"""
        return self._app_config.imports

    @property
    def cache(self) -> CacheConfig:
        """Import batch cache settings"""
        return self._app_config.cache

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config


def reset_config() -> None:
    """Forget the global default so the next get_config() reloads it"""
    global _default_config
    _default_config = None
