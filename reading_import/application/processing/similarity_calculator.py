# reading_import/application/processing/similarity_calculator.py

"""Similarity calculator for matching titles and author lists"""

# Standard library imports
from collections import Counter
from math import sqrt

# Third party imports
from fuzzywuzzy import fuzz
from rapidfuzz.distance import Levenshtein

# Local imports
from reading_import.infrastructure.config import ConfigLoader
from reading_import.shared.mixins.mixins import ConfigurableMixin
from reading_import.shared.utils.text_utils import STOPWORDS
from reading_import.shared.utils.text_utils import normalize_author
from reading_import.shared.utils.text_utils import normalize_title


class SimilarityCalculator(ConfigurableMixin):
    """Calculates normalized [0, 1] similarities between import records and catalog entries

    Title similarity is a hybrid of term-frequency cosine similarity and
    normalized Levenshtein similarity, taken as the best of the full title
    and the main title (subtitle removed). Author similarity is an unordered
    token-set comparison of the author lists.

    Methods taking ``*_normalized`` arguments expect strings already passed
    through ``normalize_title``/``normalize_author``; the library cache
    precomputes these once per batch.
    """

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize with hybrid weights from configuration

        Args:
            config: Optional configuration loader
        """
        self.config = self._init_config(config)
        self.cosine_weight = self.config.similarity.cosine_weight
        self.levenshtein_weight = self.config.similarity.levenshtein_weight

    # ------------------------------------------------------------------
    # Primitive measures
    # ------------------------------------------------------------------

    @staticmethod
    def _content_tokens(text: str) -> list[str]:
        """Tokens without stopwords, or all tokens when nothing else is left"""
        tokens = text.split()
        content = [token for token in tokens if token not in STOPWORDS]
        return content or tokens

    def cosine_similarity(self, first: str, second: str) -> float:
        """Cosine similarity of term-frequency vectors over content words"""
        first_counts = Counter(self._content_tokens(first))
        second_counts = Counter(self._content_tokens(second))
        if not first_counts or not second_counts:
            return 0.0

        dot = sum(count * second_counts[token] for token, count in first_counts.items())
        first_norm = sqrt(sum(count * count for count in first_counts.values()))
        second_norm = sqrt(sum(count * count for count in second_counts.values()))
        return dot / (first_norm * second_norm)

    @staticmethod
    def levenshtein_similarity(first: str, second: str) -> float:
        """1 - edit distance / longer length"""
        longest = max(len(first), len(second))
        if longest == 0:
            return 0.0
        return 1.0 - Levenshtein.distance(first, second) / longest

    @staticmethod
    def jaccard_similarity(first: str, second: str) -> float:
        """Overlap of the word sets of two strings"""
        first_words = set(first.split())
        second_words = set(second.split())
        if not first_words or not second_words:
            return 0.0
        return len(first_words & second_words) / len(first_words | second_words)

    def hybrid_similarity(self, first: str, second: str) -> float:
        """Weighted blend of cosine and Levenshtein similarity on normalized strings"""
        if not first or not second:
            return 0.0
        if first == second:
            return 1.0

        cosine = self.cosine_similarity(first, second)
        edit = self.levenshtein_similarity(first, second)
        score = self.cosine_weight * cosine + self.levenshtein_weight * edit
        return min(1.0, max(0.0, score))

    # ------------------------------------------------------------------
    # Titles
    # ------------------------------------------------------------------

    def title_similarity_normalized(
        self, full_first: str, main_first: str, full_second: str, main_second: str
    ) -> float:
        """Best of full-title and main-title similarity on normalized titles"""
        full_score = self.hybrid_similarity(full_first, full_second)
        if full_score == 1.0:
            return full_score
        return max(full_score, self.hybrid_similarity(main_first, main_second))

    def title_similarity(self, first: str, second: str) -> float:
        """Similarity of two raw titles

        Args:
            first: Title from the import record
            second: Title from the catalog entry

        Returns:
            Similarity from 0.0 to 1.0
        """
        return self.title_similarity_normalized(
            normalize_title(first),
            normalize_title(first, remove_subtitle=True),
            normalize_title(second),
            normalize_title(second, remove_subtitle=True),
        )

    # ------------------------------------------------------------------
    # Authors
    # ------------------------------------------------------------------

    @staticmethod
    def author_similarity_normalized(first: list[str], second: list[str]) -> float:
        """Order-insensitive similarity of two normalized author lists"""
        if not first or not second:
            return 0.0
        return fuzz.token_set_ratio(" ".join(first), " ".join(second)) / 100.0

    def author_similarity(self, first: list[str], second: list[str]) -> float:
        """Similarity of two raw author lists, ignoring order"""
        return self.author_similarity_normalized(
            [name for name in map(normalize_author, first) if name],
            [name for name in map(normalize_author, second) if name],
        )

    def primary_author_similarity_normalized(self, first: list[str], second: list[str]) -> float:
        """Similarity of the first listed author on each side"""
        if not first or not second:
            return 0.0
        return self.author_similarity_normalized(first[:1], second[:1])

    def primary_author_similarity(self, first: list[str], second: list[str]) -> float:
        """Similarity of the first listed author of two raw author lists"""
        return self.primary_author_similarity_normalized(
            [name for name in map(normalize_author, first) if name],
            [name for name in map(normalize_author, second) if name],
        )
