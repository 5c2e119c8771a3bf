"""Score to confidence band classification."""

from ..models.domain import ConfidenceBand

HIGH_CONFIDENCE_THRESHOLD = 0.85
MEDIUM_CONFIDENCE_THRESHOLD = 0.65


def classify_confidence(
    score: float,
    high_threshold: float = HIGH_CONFIDENCE_THRESHOLD,
    medium_threshold: float = MEDIUM_CONFIDENCE_THRESHOLD,
) -> ConfidenceBand:
    """
    Map a match score to a confidence band.
    
    Bands are half-open: [high_threshold, 1.0] is high,
    [medium_threshold, high_threshold) is medium, everything below is low.
    """
    if score >= high_threshold:
        return ConfidenceBand.HIGH
    if score >= medium_threshold:
        return ConfidenceBand.MEDIUM
    return ConfidenceBand.LOW
