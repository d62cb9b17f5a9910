"""Strength and direction classification of a coefficient."""

from surveylens.analysis.correlation.models import CorrelationDirection, CorrelationStrength

# Lower bounds on |r|, checked strongest first
STRENGTH_THRESHOLDS: tuple[tuple[float, CorrelationStrength], ...] = (
    (0.7, CorrelationStrength.STRONG),
    (0.4, CorrelationStrength.MODERATE),
    (0.2, CorrelationStrength.WEAK),
)


def classify_strength(r: float | None) -> CorrelationStrength:
    """Classify correlation strength by absolute value."""
    if r is None:
        return CorrelationStrength.NONE

    abs_r = abs(r)
    for threshold, strength in STRENGTH_THRESHOLDS:
        if abs_r >= threshold:
            return strength
    return CorrelationStrength.NONE


def classify_direction(r: float | None) -> CorrelationDirection:
    """Sign of the coefficient. Zero counts as positive."""
    if r is None:
        return CorrelationDirection.NONE
    return CorrelationDirection.POSITIVE if r >= 0 else CorrelationDirection.NEGATIVE
