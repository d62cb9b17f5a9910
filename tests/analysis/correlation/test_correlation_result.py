"""Tests for the CorrelationResult record."""

import pytest
from pydantic import ValidationError

from surveylens.analysis.correlation.models import (
    CorrelationDirection,
    CorrelationResult,
    CorrelationStrength,
    ScatterPoint,
)


def _build(coefficient: float | None, sample_size: int, counts: list[int]) -> CorrelationResult:
    direction = (
        CorrelationDirection.NONE if coefficient is None else CorrelationDirection.POSITIVE
    )
    return CorrelationResult(
        variable1_id="a",
        variable2_id="b",
        variable1_label="A",
        variable2_label="B",
        coefficient=coefficient,
        strength=CorrelationStrength.NONE,
        direction=direction,
        sample_size=sample_size,
        scatter_points=tuple(ScatterPoint(x=i + 1, y=1, count=c) for i, c in enumerate(counts)),
    )


class TestCorrelationResultInvariants:
    """Records must agree with their own sample."""

    def test_consistent_record(self):
        result = _build(0.1, 3, [2, 1])
        assert result.sample_size == 3

    def test_coefficient_requires_two_pairs(self):
        with pytest.raises(ValidationError, match="absent exactly when"):
            _build(0.5, 1, [1])

    def test_absent_coefficient_with_large_sample(self):
        with pytest.raises(ValidationError, match="absent exactly when"):
            _build(None, 4, [4])

    def test_scatter_counts_must_match_sample_size(self):
        with pytest.raises(ValidationError, match="scatter point counts"):
            _build(0.3, 5, [1, 1])

    def test_missing_scatter_points(self):
        with pytest.raises(ValidationError, match="scatter point counts"):
            _build(0.3, 5, [])

    def test_empty_sample(self):
        result = _build(None, 0, [])
        assert result.scatter_points == ()


class TestMagnitude:
    """Tests for has_coefficient and magnitude."""

    def test_negative_coefficient(self):
        result = _build(-0.42, 3, [3])

        assert result.has_coefficient
        assert result.magnitude == pytest.approx(0.42)

    def test_absent_coefficient(self):
        result = _build(None, 1, [1])

        assert not result.has_coefficient
        assert result.magnitude is None
