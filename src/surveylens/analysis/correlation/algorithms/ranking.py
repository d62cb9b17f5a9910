"""Ranking and truncation of pair results."""

from collections.abc import Sequence

from surveylens.analysis.correlation.models import CorrelationResult, DatasetValidationError


def validate_top_k(top_k: int) -> None:
    """Raise DatasetValidationError unless top_k is a positive integer."""
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
        raise DatasetValidationError(f"top_k must be a positive integer, got {top_k!r}")


def _rank_key(result: CorrelationResult) -> tuple[bool, float]:
    # Absent coefficients sort last; within each group, larger |r| first
    magnitude = result.magnitude
    if magnitude is None:
        return (True, 0.0)
    return (False, -magnitude)


def rank_correlations(
    results: Sequence[CorrelationResult],
    top_k: int,
) -> list[CorrelationResult]:
    """Order results by |coefficient| descending and keep the first top_k.

    The sort is stable: ties in magnitude and all absent-coefficient
    results keep their input order.

    Raises:
        DatasetValidationError: If top_k is not a positive integer
    """
    validate_top_k(top_k)

    ranked = sorted(results, key=_rank_key)
    return ranked[:top_k]
