"""Tests for correlation presentation helpers."""

import pytest

from surveylens.analysis.correlation.algorithms import classify_direction, classify_strength
from surveylens.analysis.correlation.formatting import (
    NEUTRAL_COLOR,
    correlation_color,
    direction_label,
    percentage,
    point_size,
    sample_size_notice,
    strength_label,
)
from surveylens.analysis.correlation.models import (
    CorrelationDirection,
    CorrelationResult,
    CorrelationStrength,
    ScatterPoint,
)
from surveylens.core.config import Settings


def _result(coefficient: float | None, sample_size: int = 20) -> CorrelationResult:
    return CorrelationResult(
        variable1_id="a",
        variable2_id="b",
        variable1_label="A",
        variable2_label="B",
        coefficient=coefficient,
        strength=classify_strength(coefficient),
        direction=classify_direction(coefficient),
        sample_size=sample_size,
        scatter_points=(ScatterPoint(x=4, y=4, count=sample_size),),
    )


class TestLabels:
    """Tests for strength and direction labels."""

    def test_strength_labels(self):
        assert strength_label(CorrelationStrength.STRONG) == "Strong Correlation"
        assert strength_label(CorrelationStrength.NONE) == "No Correlation"

    def test_direction_labels(self):
        assert direction_label(CorrelationDirection.NEGATIVE) == "Negative"
        assert direction_label(CorrelationDirection.NONE) == "None"


class TestCorrelationColor:
    """Tests for the card palette."""

    def test_strong_positive_is_green(self):
        assert correlation_color(_result(0.9)).primary == "#059669"

    def test_strong_negative_is_red(self):
        assert correlation_color(_result(-0.9)).primary == "#dc2626"

    def test_weak_negative(self):
        assert correlation_color(_result(-0.25)).primary == "#d97706"

    def test_no_correlation_is_neutral(self):
        assert correlation_color(_result(0.05)) == NEUTRAL_COLOR
        assert correlation_color(_result(None, sample_size=1)) == NEUTRAL_COLOR


class TestPercentage:
    """Tests for percentage."""

    def test_rounds_magnitude(self):
        assert percentage(_result(-0.456)) == 46

    def test_absent_is_zero(self):
        assert percentage(_result(None, sample_size=1)) == 0


class TestPointSize:
    """Tests for scatter marker sizing."""

    def test_range(self):
        assert point_size(1, 1) == 300.0
        assert point_size(0, 4) == 60.0
        assert point_size(2, 4) == pytest.approx(180.0)

    def test_zero_max_count(self):
        """A zero max count does not divide by zero."""
        assert point_size(0, 0) == 60.0


class TestSampleSizeNotice:
    """Tests for sample_size_notice."""

    def test_defaults(self):
        settings = Settings(min_meaningful_sample=5, small_sample_threshold=10)

        assert sample_size_notice(4, settings) == "insufficient"
        assert sample_size_notice(5, settings) == "small"
        assert sample_size_notice(9, settings) == "small"
        assert sample_size_notice(10, settings) is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SURVEYLENS_SMALL_SAMPLE_THRESHOLD", "50")

        assert sample_size_notice(20) == "small"
