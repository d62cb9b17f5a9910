"""Presentation helpers for correlation results.

Labels, colour palette and sizing used by cards and scatter plots. These
never change the numbers; they only map a result to display values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from surveylens.analysis.correlation.models import (
    CorrelationDirection,
    CorrelationResult,
    CorrelationStrength,
)
from surveylens.core.config import Settings, get_settings

SampleNotice = Literal["insufficient", "small"]

_STRENGTH_LABELS: dict[CorrelationStrength, str] = {
    CorrelationStrength.STRONG: "Strong Correlation",
    CorrelationStrength.MODERATE: "Moderate Correlation",
    CorrelationStrength.WEAK: "Weak Correlation",
    CorrelationStrength.NONE: "No Correlation",
}

_DIRECTION_LABELS: dict[CorrelationDirection, str] = {
    CorrelationDirection.POSITIVE: "Positive",
    CorrelationDirection.NEGATIVE: "Negative",
    CorrelationDirection.NONE: "None",
}


@dataclass(frozen=True)
class CorrelationColor:
    """Colours for one result card (hex primary/secondary, rgba glow)."""

    primary: str
    secondary: str
    glow: str


NEUTRAL_COLOR = CorrelationColor("#6b7280", "#9ca3af", "rgba(107, 114, 128, 0.2)")

_PALETTE: dict[tuple[CorrelationDirection, CorrelationStrength], CorrelationColor] = {
    (CorrelationDirection.POSITIVE, CorrelationStrength.STRONG): CorrelationColor(
        "#059669", "#10b981", "rgba(5, 150, 105, 0.2)"
    ),
    (CorrelationDirection.POSITIVE, CorrelationStrength.MODERATE): CorrelationColor(
        "#0891b2", "#06b6d4", "rgba(8, 145, 178, 0.2)"
    ),
    (CorrelationDirection.POSITIVE, CorrelationStrength.WEAK): CorrelationColor(
        "#6366f1", "#818cf8", "rgba(99, 102, 241, 0.2)"
    ),
    (CorrelationDirection.NEGATIVE, CorrelationStrength.STRONG): CorrelationColor(
        "#dc2626", "#ef4444", "rgba(220, 38, 38, 0.2)"
    ),
    (CorrelationDirection.NEGATIVE, CorrelationStrength.MODERATE): CorrelationColor(
        "#ea580c", "#f97316", "rgba(234, 88, 12, 0.2)"
    ),
    (CorrelationDirection.NEGATIVE, CorrelationStrength.WEAK): CorrelationColor(
        "#d97706", "#f59e0b", "rgba(217, 119, 6, 0.2)"
    ),
}


def strength_label(strength: CorrelationStrength) -> str:
    """Human-readable label for a strength band."""
    return _STRENGTH_LABELS[CorrelationStrength(strength)]


def direction_label(direction: CorrelationDirection) -> str:
    return _DIRECTION_LABELS[CorrelationDirection(direction)]


def correlation_color(result: CorrelationResult) -> CorrelationColor:
    """Pick card colours by direction and strength; grey when there is nothing to show."""
    if not result.has_coefficient or result.strength == CorrelationStrength.NONE:
        return NEUTRAL_COLOR
    return _PALETTE.get((result.direction, result.strength), NEUTRAL_COLOR)


def percentage(result: CorrelationResult) -> int:
    """|r| as a rounded percentage, 0 when no coefficient exists."""
    magnitude = result.magnitude
    if magnitude is None:
        return 0
    return round(magnitude * 100)


def point_size(
    count: int,
    max_count: int,
    min_size: float = 60.0,
    max_size: float = 300.0,
) -> float:
    """Scale a scatter point's marker area by how many respondents share it."""
    max_count = max(max_count, 1)
    return min_size + (count / max_count) * (max_size - min_size)


def sample_size_notice(
    sample_size: int,
    settings: Settings | None = None,
) -> SampleNotice | None:
    """Flag results whose paired sample is too small to trust."""
    settings = settings or get_settings()
    if sample_size < settings.min_meaningful_sample:
        return "insufficient"
    if sample_size < settings.small_sample_threshold:
        return "small"
    return None
