# reading_import/application/processing/__init__.py

"""Processing components: normalization, similarity, library cache and matching"""

# Local imports
from reading_import.application.processing.library_cache import LibraryCache
from reading_import.application.processing.library_cache import NormalizedRecord
from reading_import.application.processing.similarity_calculator import (
    SimilarityCalculator,
)

__all__ = ["LibraryCache", "NormalizedRecord", "SimilarityCalculator"]
