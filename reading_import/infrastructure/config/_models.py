# reading_import/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load as json_load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

# Local imports
from reading_import.core.types.json import JSONDict

logger = getLogger(__name__)


class MatchingThresholds(BaseModel):
    """Similarity cutoffs and scores for the tiered matcher

    Similarities are in [0, 1]; scores are on the 0-100 scale.
    """

    isbn_title_min: float = Field(
        0.60, ge=0, le=1, description="Title similarity required to accept an ISBN hit"
    )
    exact_title: float = Field(0.90, ge=0, le=1, description="Title cutoff for the exact tier")
    exact_primary_author: float = Field(
        0.80, ge=0, le=1, description="Primary author cutoff for the exact tier"
    )
    high_title: float = Field(0.95, ge=0, le=1, description="Title cutoff for the high tier")
    high_author: float = Field(
        0.80, ge=0, le=1, description="Author set cutoff for the high tier"
    )
    medium_title: float = Field(0.80, ge=0, le=1, description="Title cutoff for the medium tier")
    relaxed_title: float = Field(
        0.65, ge=0, le=1, description="Title cutoff for the typo-tolerant tier"
    )
    substring_min_length: int = Field(
        10, ge=1, description="Minimum normalized title length for substring matching"
    )
    substring_author: float = Field(
        0.50, ge=0, le=1, description="Author set cutoff for substring matching"
    )
    isbn_score: int = Field(100, ge=0, le=100, description="Score of an accepted ISBN match")
    exact_score: int = Field(95, ge=0, le=100, description="Score of the exact fuzzy tier")
    high_score: int = Field(90, ge=0, le=100, description="Score of the high fuzzy tier")
    substring_score: int = Field(75, ge=0, le=100, description="Score of a substring match")


class ConfidenceBoundaries(BaseModel):
    """Lower score bounds of each confidence tier"""

    exact: int = Field(95, ge=0, le=100)
    high: int = Field(80, ge=0, le=100)
    medium: int = Field(70, ge=0, le=100)
    low: int = Field(60, ge=0, le=100)

    @model_validator(mode="after")
    def validate_order(self) -> "ConfidenceBoundaries":
        """Ensure tiers are strictly descending"""
        if not (self.exact > self.high > self.medium > self.low):
            raise ValueError("Confidence boundaries must be strictly descending")
        return self


class SimilarityConfig(BaseModel):
    """Weights of the hybrid title similarity"""

    cosine_weight: float = Field(0.7, ge=0, le=1, description="Term-frequency cosine weight")
    levenshtein_weight: float = Field(0.3, ge=0, le=1, description="Edit distance weight")

    @model_validator(mode="after")
    def validate_weights(self) -> "SimilarityConfig":
        """Ensure weights sum to 1.0"""
        total = self.cosine_weight + self.levenshtein_weight
        if not (0.99 <= total <= 1.01):  # Allow small floating point errors
            raise ValueError(f"Weights must sum to 1.0, got {total}")
        return self


class ImportConfig(BaseModel):
    """Upload and execution settings"""

    max_file_size_bytes: int = Field(
        10 * 1024 * 1024, gt=0, description="Largest accepted upload"
    )
    allowed_extensions: list[str] = Field(default=[".csv"], description="Accepted file types")
    batch_size: int = Field(100, gt=0, description="Records executed per batch")
    preview_page_size: int = Field(500, gt=0, description="Default preview page size")
    skip_duplicates: bool = Field(True, description="Skip records matching an existing session")
    progress_note: str = Field(
        "Imported from reading history", description="Note on backfilled progress entries"
    )

    @field_validator("allowed_extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Lowercase extensions with a leading dot"""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]


class CacheConfig(BaseModel):
    """Transient import batch cache"""

    ttl_seconds: int = Field(30 * 60, gt=0, description="Lifetime of a cached import batch")
    sweep_interval_seconds: int = Field(
        5 * 60, gt=0, description="Minimum time between expiry sweeps"
    )


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")
    log_dir: str = Field("logs", description="Directory for generated log files")


class AppConfig(BaseModel):
    """Root application configuration model"""

    matching: MatchingThresholds = Field(default_factory=MatchingThresholds)
    confidence: ConfidenceBoundaries = Field(default_factory=ConfidenceBoundaries)
    similarity: SimilarityConfig = Field(default_factory=SimilarityConfig)
    imports: ImportConfig = Field(default_factory=ImportConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json_load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
