# reading_import/core/domain/match_result.py

"""Match result domain model"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

# Local imports
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import MatchReason
from reading_import.core.domain.enums import UnmatchedReason
from reading_import.core.domain.import_record import ImportRecord


class MatchResult(BaseModel):
    """Pairing of an import record with at most one catalog entry"""

    model_config = ConfigDict(frozen=True)

    import_record: ImportRecord
    matched_book: CatalogEntry | None = None
    confidence: MatchConfidence = MatchConfidence.UNMATCHED
    confidence_score: int = Field(0, ge=0, le=100, description="Rounded 0-100 score")
    match_reason: MatchReason = MatchReason.NO_MATCH
    unmatched_reason: UnmatchedReason | None = Field(
        None, description="Why no catalog entry was found, only set when unmatched"
    )

    @model_validator(mode="after")
    def check_consistency(self) -> "MatchResult":
        """A result is either matched with a book or unmatched without one"""
        unmatched = self.confidence is MatchConfidence.UNMATCHED
        if unmatched == (self.matched_book is not None):
            raise ValueError("matched_book must be set exactly when confidence is not unmatched")
        if self.confidence_score == 0 and not unmatched:
            raise ValueError("A score of 0 requires an unmatched confidence")
        return self

    @property
    def is_matched(self) -> bool:
        """Whether a catalog entry was found"""
        return self.matched_book is not None
