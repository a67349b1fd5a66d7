# reading_import/infrastructure/cache/__init__.py

"""Cache infrastructure for transient import batches.

This module holds scored imports between upload and execution.
"""

# Local imports
from reading_import.infrastructure.cache._import_batch_cache import ImportBatchCache

__all__ = ["ImportBatchCache"]
