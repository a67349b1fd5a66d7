# reading_import/shared/mixins/__init__.py

"""Mixins shared across application classes"""

# Local imports
from reading_import.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
