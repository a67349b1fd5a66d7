# reading_import/application/processing/library_cache.py

"""Per-batch lookup index over a catalog snapshot"""

# Standard library imports
from logging import getLogger
from typing import NamedTuple

# Local imports
from reading_import.core.domain.catalog_entry import CatalogEntry
from reading_import.core.domain.import_record import ImportRecord
from reading_import.shared.utils.isbn_utils import isbn_equals
from reading_import.shared.utils.isbn_utils import normalize_isbn
from reading_import.shared.utils.text_utils import normalize_author
from reading_import.shared.utils.text_utils import normalize_title

logger = getLogger(__name__)


class LibraryCache:
    """Index built once per matching batch

    Entries are kept sorted by id so the fuzzy scan visits them in a stable
    order regardless of how the catalog returned them; on score ties the
    lowest id wins. The cache is never updated in place. A new catalog
    snapshot requires a new cache.
    """

    __slots__ = (
        "entries",
        "books_by_isbn",
        "normalized_titles",
        "main_titles",
        "normalized_authors",
    )

    def __init__(self, entries: list[CatalogEntry]) -> None:
        """Build the index

        Args:
            entries: Every catalog entry in the snapshot
        """
        self.entries: tuple[CatalogEntry, ...] = tuple(sorted(entries, key=lambda e: e.id))
        self.books_by_isbn: dict[str, CatalogEntry] = {}
        self.normalized_titles: dict[int, str] = {}
        self.main_titles: dict[int, str] = {}
        self.normalized_authors: dict[int, list[str]] = {}

        for entry in self.entries:
            normalized = normalize_isbn(entry.isbn)
            # First entry by id keeps the slot when the catalog holds duplicates
            if normalized and normalized not in self.books_by_isbn:
                self.books_by_isbn[normalized] = entry

            self.normalized_titles[entry.id] = normalize_title(entry.title)
            self.main_titles[entry.id] = normalize_title(entry.title, remove_subtitle=True)
            self.normalized_authors[entry.id] = [
                name for name in map(normalize_author, entry.authors) if name
            ]

        logger.debug(
            f"Built library cache: {len(self.entries)} entries, "
            f"{len(self.books_by_isbn)} indexed ISBNs"
        )

    def __len__(self) -> int:
        return len(self.entries)

    def find_by_isbn(self, normalized_isbn: str) -> CatalogEntry | None:
        """Exact index lookup, then a linear scan for 10/13 equivalents"""
        entry = self.books_by_isbn.get(normalized_isbn)
        if entry is not None:
            return entry

        for candidate in self.entries:
            if candidate.isbn and isbn_equals(candidate.isbn, normalized_isbn):
                return candidate
        return None


class NormalizedRecord(NamedTuple):
    """Matching forms of an import record, computed once per record"""

    title: str
    main_title: str
    authors: list[str]

    @classmethod
    def from_record(cls, record: ImportRecord) -> "NormalizedRecord":
        """Normalize the title, main title and authors of a record"""
        return cls(
            title=normalize_title(record.title),
            main_title=normalize_title(record.title, remove_subtitle=True),
            authors=[name for name in map(normalize_author, record.authors) if name],
        )
