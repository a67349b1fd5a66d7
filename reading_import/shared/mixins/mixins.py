# reading_import/shared/mixins/mixins.py

"""Common mixins for reducing code duplication across classes

When to use mixins vs utility functions:
- Mixins: shared behavior across classes that need instance state
- Utils: standalone functions that transform data (ISBN, dates, text)
"""

# Standard library imports
from logging import getLogger

# Local imports
from reading_import.infrastructure.config import ConfigLoader
from reading_import.infrastructure.config import get_config

logger = getLogger(__name__)


class ConfigurableMixin:
    """Mixin for classes that need configuration access

    Used by:
    - SimilarityCalculator
    - LibraryMatcher
    - ImportExecutor
    - PreviewService
    - ImportService
    """

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Initialize configuration, using default if not provided

        Args:
            config: Optional ConfigLoader instance

        Returns:
            ConfigLoader instance (provided or default)
        """
        if config is None:
            config = get_config()
        return config
