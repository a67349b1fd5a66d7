# reading_import/application/models/preview.py

"""Pydantic models for the paginated import preview"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from reading_import.application.models.match_summary import MatchSummary
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.import_record import ImportRecord


class PreviewItem(BaseModel):
    """One match result as shown to the user before importing"""

    model_config = ConfigDict()

    row_number: int
    import_data: ImportRecord
    matched_book: CatalogEntry | None = None
    match_reason: str = Field(..., description="Display text for the rule that fired")
    confidence: MatchConfidence
    confidence_score: int
    will_create_session: bool = False
    is_duplicate: bool = False
    warnings: list[str] = Field(default_factory=list)


class Pagination(BaseModel):
    """Window over the filtered result set"""

    model_config = ConfigDict()

    offset: int = Field(0, ge=0)
    limit: int = Field(..., gt=0)
    total: int = Field(..., ge=0, description="Results after confidence filtering")
    has_more: bool = False


class PreviewPage(BaseModel):
    """Paginated preview of a cached import batch"""

    model_config = ConfigDict()

    import_id: str
    file_name: str
    provider: Provider
    summary: MatchSummary
    items: list[PreviewItem] = Field(default_factory=list)
    pagination: Pagination
