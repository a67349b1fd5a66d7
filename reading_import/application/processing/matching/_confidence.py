# reading_import/application/processing/matching/_confidence.py

"""Score to confidence classification and display text for match reasons"""

# Local imports
from reading_import.core.domain.enums import MatchConfidence
from reading_import.core.domain.enums import MatchReason
from reading_import.infrastructure.config import ConfidenceBoundaries

MATCH_REASON_DESCRIPTIONS = {
    MatchReason.ISBN_MATCH: "Exact ISBN match",
    MatchReason.TITLE_AUTHOR_EXACT: "Exact title and author match",
    MatchReason.TITLE_AUTHOR_HIGH: "High confidence title and author match",
    MatchReason.TITLE_AUTHOR_MEDIUM: "Medium confidence title and author match",
    MatchReason.TITLE_FUZZY_RELAXED: "Fuzzy title match",
    MatchReason.SUBSTRING_TITLE_MATCH: "Title found within a longer library title",
    MatchReason.NO_MATCH: "No matching book found in library",
}


def classify_confidence(
    score: float, boundaries: ConfidenceBoundaries | None = None
) -> MatchConfidence:
    """Map a 0-100 score onto a confidence tier

    Args:
        score: Match score
        boundaries: Tier lower bounds, defaults to 95/80/70/60

    Returns:
        Confidence tier
    """
    bounds = boundaries or ConfidenceBoundaries()

    if score >= bounds.exact:
        return MatchConfidence.EXACT
    if score >= bounds.high:
        return MatchConfidence.HIGH
    if score >= bounds.medium:
        return MatchConfidence.MEDIUM
    if score >= bounds.low:
        return MatchConfidence.LOW
    return MatchConfidence.UNMATCHED


def describe_reason(reason: MatchReason | str) -> str:
    """Display text for a match reason, unknown values pass through"""
    if isinstance(reason, str):
        try:
            reason = MatchReason(reason)
        except ValueError:
            return reason
    return MATCH_REASON_DESCRIPTIONS[reason]
