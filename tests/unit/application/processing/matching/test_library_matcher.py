# tests/unit/application/processing/matching/test_library_matcher.py

"""Tests for the tiered library matcher"""

# Standard library imports
from unittest.mock import MagicMock
from unittest.mock import patch

# Third party imports
import pytest

# Local imports
from reading_import.application.processing.matching import LibraryMatcher
from reading_import.application.processing.matching._fuzzy_scorer import CandidateScore
from reading_import.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import MatchReason
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.infrastructure.persistence import InMemoryCatalog
from tests.fixtures.library import DUNE_ISBN13
from tests.fixtures.library import PRAGMATIC_ISBN10
from tests.fixtures.library import PRAGMATIC_ISBN13
from tests.fixtures.library import UNKNOWN_ISBN13
from tests.fixtures.library import make_entry
from tests.fixtures.library import make_record


@pytest.fixture
def matcher(catalog, default_config) -> LibraryMatcher:
    return LibraryMatcher(catalog, default_config)


def _match_one(matcher, record):
    return matcher.match_batch([record])[0]


class TestIsbnTier:
    """Test identifier matching"""

    def test_isbn13_with_short_title(self, matcher):
        record = make_record(
            title="The Pragmatic Programmer",
            authors=["Andrew Hunt"],
            isbn13=PRAGMATIC_ISBN13,
        )
        result = _match_one(matcher, record)
        assert result.matched_book.id == 1
        assert result.confidence == MatchConfidence.EXACT
        assert result.confidence_score == 100
        assert result.match_reason == MatchReason.ISBN_MATCH

    def test_isbn10_finds_isbn13_entry(self, matcher):
        record = make_record(
            title="The Pragmatic Programmer", authors=["Andrew Hunt"], isbn=PRAGMATIC_ISBN10
        )
        result = _match_one(matcher, record)
        assert result.matched_book.id == 1
        assert result.match_reason == MatchReason.ISBN_MATCH

    def test_isbn_hit_with_wrong_title_is_rejected(self, matcher):
        record = make_record(
            title="Cooking for Beginners", authors=["Jane Cook"], isbn13=PRAGMATIC_ISBN13
        )
        result = _match_one(matcher, record)
        assert not result.is_matched
        assert result.unmatched_reason == UnmatchedReason.NO_TITLE_MATCH

    def test_unknown_isbn(self, matcher):
        record = make_record(
            title="Cooking for Beginners", authors=["Jane Cook"], isbn13=UNKNOWN_ISBN13
        )
        result = _match_one(matcher, record)
        assert result.confidence == MatchConfidence.UNMATCHED
        assert result.unmatched_reason == UnmatchedReason.ISBN_NOT_FOUND

    def test_isbn_miss_falls_through_to_fuzzy(self, matcher):
        record = make_record(title="Dune", authors=["Frank Herbert"], isbn13=UNKNOWN_ISBN13)
        result = _match_one(matcher, record)
        assert result.matched_book.id == 3
        assert result.match_reason == MatchReason.TITLE_AUTHOR_EXACT


class TestFuzzyTier:
    """Test title/author matching without identifiers"""

    def test_exact_title_and_author(self, matcher):
        result = _match_one(matcher, make_record(title="Dune", authors=["Frank Herbert"]))
        assert result.matched_book.id == 3
        assert result.confidence == MatchConfidence.EXACT
        assert result.confidence_score == 95
        assert result.match_reason == MatchReason.TITLE_AUTHOR_EXACT

    def test_author_order_differs(self, matcher):
        record = make_record(
            title="Pragmatic Programmer: Your Journey to Mastery",
            authors=["Andrew Hunt", "David Thomas"],
        )
        result = _match_one(matcher, record)
        assert result.matched_book.id == 1
        assert result.confidence == MatchConfidence.HIGH
        assert result.confidence_score == 90
        assert result.match_reason == MatchReason.TITLE_AUTHOR_HIGH

    def test_substring_title(self, matcher):
        record = make_record(title="The Wishing Spell", authors=["Chris Colfer"])
        result = _match_one(matcher, record)
        assert result.matched_book.id == 2
        assert result.confidence == MatchConfidence.MEDIUM
        assert result.confidence_score == 75
        assert result.match_reason == MatchReason.SUBSTRING_TITLE_MATCH

    def test_no_identifier_and_no_match(self, matcher):
        record = make_record(title="Cooking for Beginners", authors=["Jane Cook"])
        result = _match_one(matcher, record)
        assert not result.is_matched
        assert result.confidence_score == 0
        assert result.match_reason == MatchReason.NO_MATCH
        assert result.unmatched_reason == UnmatchedReason.NO_ISBN

    def test_score_is_rounded_before_classification(self, catalog, default_config):
        calc = MagicMock(spec=SimilarityCalculator)
        calc.title_similarity_normalized.return_value = 0.796
        calc.primary_author_similarity_normalized.return_value = 0.0
        calc.author_similarity_normalized.return_value = 0.0
        matcher = LibraryMatcher(catalog, default_config, similarity_calculator=calc)

        result = _match_one(matcher, make_record(title="Anything at all"))
        assert result.matched_book.id == 1
        assert result.confidence_score == 80
        assert result.confidence == MatchConfidence.HIGH
        assert result.match_reason == MatchReason.TITLE_AUTHOR_MEDIUM

    @pytest.mark.parametrize(
        "raw_score, expected_score, expected_confidence",
        [
            (72.5, 73, MatchConfidence.MEDIUM),
            (94.5, 95, MatchConfidence.EXACT),
            (79.49, 79, MatchConfidence.MEDIUM),
        ],
    )
    def test_half_scores_round_up(self, matcher, raw_score, expected_score, expected_confidence):
        entry = make_entry(id=7, title="Dune Messiah")
        candidate = CandidateScore(entry, raw_score, MatchReason.TITLE_FUZZY_RELAXED)
        with patch.object(matcher.fuzzy_scorer, "best_candidate", return_value=candidate):
            result = _match_one(matcher, make_record(title="Dune Messiah"))

        assert result.matched_book.id == 7
        assert result.confidence_score == expected_score
        assert result.confidence == expected_confidence

    def test_tie_breaks_on_lowest_id(self, default_config):
        catalog = InMemoryCatalog(
            [
                make_entry(id=11, title="Dune", authors=["Frank Herbert"]),
                make_entry(id=10, title="Dune", authors=["Frank Herbert"]),
            ]
        )
        result = _match_one(LibraryMatcher(catalog, default_config), make_record())
        assert result.matched_book.id == 10


class TestBatch:
    """Test batch behavior and caching"""

    def test_order_and_length_preserved(self, matcher):
        records = [
            make_record(title="Cooking for Beginners", authors=["Jane Cook"], row_number=2),
            make_record(title="Dune", row_number=3),
            make_record(title="Project Hail Mary", authors=["Andy Weir"], row_number=4),
        ]
        results = matcher.match_batch(records)
        assert [r.import_record.row_number for r in results] == [2, 3, 4]
        assert [r.is_matched for r in results] == [False, True, True]

    def test_empty_batch(self, matcher):
        assert matcher.match_batch([]) == []

    def test_cache_reused_until_cleared(self, matcher, catalog):
        first = matcher.build_cache()
        catalog.add(make_entry(id=50, title="Piranesi", authors=["Susanna Clarke"]))
        assert matcher.build_cache() is first
        piranesi = make_record(title="Piranesi", authors=["Susanna Clarke"])
        assert not _match_one(matcher, piranesi).is_matched

        matcher.clear_cache()
        result = _match_one(matcher, piranesi)
        assert result.matched_book.id == 50

    def test_summarize(self, matcher):
        results = matcher.match_batch(
            [make_record(), make_record(title="Cooking for Beginners", authors=["Jane Cook"])]
        )
        summary = matcher.summarize(results)
        assert summary.total_records == 2
        assert summary.exact_matches == 1
        assert summary.unmatched == 1

    def test_dune_isbn13(self, matcher):
        result = _match_one(matcher, make_record(isbn13=DUNE_ISBN13))
        assert result.match_reason == MatchReason.ISBN_MATCH
