# reading_import/core/domain/catalog_entry.py

"""Read-only snapshot of a library catalog item"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class CatalogEntry(BaseModel):
    """A canonical library item the user already owns"""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    authors: list[str] = Field(default_factory=list)
    isbn: str | None = Field(None, description="ISBN as stored by the catalog")
    total_pages: int | None = Field(None, description="Page count, used for progress backfill")
    rating: int | None = Field(None, description="Current rating owned by the catalog")
    external_id: int | None = Field(
        None, description="Identifier used to address writes to the external catalog"
    )

    @property
    def primary_author(self) -> str:
        """First listed author or empty string"""
        return self.authors[0] if self.authors else ""
