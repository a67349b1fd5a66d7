# reading_import/application/models/match_summary.py

"""Pydantic model for per-batch match statistics"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.match_result import MatchResult

_CONFIDENCE_FIELDS = {
    MatchConfidence.EXACT: "exact_matches",
    MatchConfidence.HIGH: "high_confidence",
    MatchConfidence.MEDIUM: "medium_confidence",
    MatchConfidence.LOW: "low_confidence",
    MatchConfidence.UNMATCHED: "unmatched",
}


class MatchSummary(BaseModel):
    """Counts of match results per confidence tier"""

    model_config = ConfigDict()

    total_records: int = Field(0, description="Number of match results")
    exact_matches: int = Field(0, description="Results classified exact")
    high_confidence: int = Field(0, description="Results classified high")
    medium_confidence: int = Field(0, description="Results classified medium")
    low_confidence: int = Field(0, description="Results classified low")
    unmatched: int = Field(0, description="Results without a catalog entry")

    @property
    def matched(self) -> int:
        """Results with a catalog entry"""
        return self.total_records - self.unmatched

    def increment(self, field: str, value: int = 1) -> None:
        """Increment a statistic field

        Args:
            field: Field name to increment
            value: Amount to increment by
        """
        if hasattr(self, field):
            current = getattr(self, field)
            setattr(self, field, current + value)

    def add(self, result: MatchResult) -> None:
        """Count one result"""
        self.increment("total_records")
        self.increment(_CONFIDENCE_FIELDS[result.confidence])

    @classmethod
    def from_results(cls, results: list[MatchResult]) -> "MatchSummary":
        """Summarize a result set"""
        summary = cls()
        for result in results:
            summary.add(result)
        return summary

    def to_dict(self) -> dict:
        """Convert to dictionary, including the derived matched count"""
        data = self.model_dump()
        data["matched"] = self.matched
        return data
