"""Complete-case pairing of two answer columns."""

from collections.abc import Sequence

import numpy as np

from surveylens.analysis.correlation.models import DatasetValidationError, PairedSample


def to_float_column(values: Sequence[int | None]) -> np.ndarray:
    """Convert nullable answers to a float array with NaN for skipped slots."""
    return np.array([np.nan if v is None else v for v in values], dtype=np.float64)


def pair_complete_cases(
    values_a: Sequence[int | None],
    values_b: Sequence[int | None],
) -> PairedSample:
    """Keep only respondents who answered both variables.

    Args:
        values_a: Answers for the first variable, one slot per respondent
        values_b: Answers for the second variable, aligned by respondent

    Returns:
        PairedSample preserving respondent order (may be empty)

    Raises:
        DatasetValidationError: If the columns are not the same length
    """
    if len(values_a) != len(values_b):
        raise DatasetValidationError(
            f"Answer columns must be aligned: got lengths {len(values_a)} and {len(values_b)}"
        )

    col_a = to_float_column(values_a)
    col_b = to_float_column(values_b)

    # Remove NaN pairs
    mask = ~(np.isnan(col_a) | np.isnan(col_b))

    return PairedSample(
        x=tuple(int(v) for v in col_a[mask]),
        y=tuple(int(v) for v in col_b[mask]),
    )
