# reading_import/application/processing/normalizers/_columns.py

"""Column requirements and header checks per export provider"""

# Local imports
from reading_import.core.domain.enums import Provider
from reading_import.core.domain.errors import StructuralError

type RawRow = dict[str, str | None]

REQUIRED_COLUMNS: dict[Provider, tuple[str, ...]] = {
    Provider.GOODREADS: ("Title", "Author", "Exclusive Shelf"),
    Provider.STORYGRAPH: ("Title", "Authors", "Read Status"),
}

# Columns that only appear in one provider's export
SIGNATURE_COLUMNS: dict[Provider, tuple[str, ...]] = {
    Provider.GOODREADS: ("Exclusive Shelf", "Author"),
    Provider.STORYGRAPH: ("Read Status", "Authors"),
}


def cell(row: RawRow, column: str) -> str:
    """Stripped cell value, empty string for missing cells"""
    value = row.get(column)
    return value.strip() if value else ""


def detect_provider(headers: list[str]) -> Provider | None:
    """Guess the provider from a header row, None if it matches neither"""
    header_set = set(headers)
    for provider, columns in SIGNATURE_COLUMNS.items():
        if header_set.issuperset(columns):
            return provider
    return None


def validate_headers(headers: list[str], provider: Provider) -> None:
    """Ensure every required column is present

    Raises:
        StructuralError: If any required column is missing
    """
    header_set = set(headers)
    missing = [column for column in REQUIRED_COLUMNS[provider] if column not in header_set]
    if missing:
        raise StructuralError(
            f"{provider.display_name} CSV is missing required columns: {', '.join(missing)}",
            missing_columns=missing,
        )


def provider_mismatch_warning(headers: list[str], provider: Provider) -> str | None:
    """Warning text when the headers look like a different provider's export"""
    detected = detect_provider(headers)
    if detected is not None and detected is not provider:
        return (
            f"CSV appears to be from {detected.display_name} "
            f"but {provider.display_name} was selected"
        )
    return None
