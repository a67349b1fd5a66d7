# reading_import/core/domain/import_record.py

"""Provider-agnostic record produced by export normalization"""

# Standard library imports
from datetime import date

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Local imports
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.enums import ReadingStatus
from reading_import.shared.utils.isbn_utils import is_valid_isbn


class ImportRecord(BaseModel):
    """One row of a reading-history export after cleaning

    Immutable once produced. Identifier fields are either absent or hold a
    check-digit valid ISBN-10/13 string.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Book title as exported")
    authors: list[str] = Field(..., min_length=1, description="Ordered author names")
    isbn: str | None = Field(None, description="Normalized ISBN from the primary column")
    isbn13: str | None = Field(None, description="Normalized ISBN-13")
    total_pages: int | None = Field(None, gt=0, description="Page count")
    rating: int | None = Field(None, ge=1, le=5, description="Star rating, None if unrated")
    started_date: date | None = Field(None, description="Date reading started")
    completed_date: date | None = Field(None, description="Date reading finished")
    status: ReadingStatus
    review: str | None = Field(None, description="Plain-text review")
    read_count: int = Field(1, ge=1, description="Number of times read")
    row_number: int = Field(..., ge=1, description="1-based line number in the source file")
    provider: Provider

    @field_validator("isbn", "isbn13")
    @classmethod
    def validate_isbn(cls, v: str | None) -> str | None:
        """Reject identifiers that fail check-digit validation"""
        if v is not None and not is_valid_isbn(v):
            raise ValueError(f"Invalid ISBN: {v}")
        return v

    @property
    def primary_author(self) -> str:
        """First listed author"""
        return self.authors[0]

    @property
    def best_isbn(self) -> str | None:
        """ISBN-13 when available, otherwise the primary ISBN"""
        return self.isbn13 or self.isbn
