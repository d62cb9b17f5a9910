"""Pearson correlation coefficient on paired ordinal answers.

Sums are accumulated over exact integers so that a constant column
yields an exactly-zero denominator.
"""

import math
from collections.abc import Sequence

import numpy as np


def compute_pearson(x: Sequence[int], y: Sequence[int]) -> float | None:
    """Compute Pearson's r for two equal-length integer sequences.

    r = (n·Σxy − Σx·Σy) / sqrt((n·Σx² − (Σx)²)·(n·Σy² − (Σy)²))

    Returns:
        None when fewer than two pairs exist, 0.0 when either side is
        constant, otherwise r clamped to [-1, 1].
    """
    n = len(x)
    if n != len(y):
        raise ValueError(f"Sequences differ in length: {n} != {len(y)}")
    if n < 2:
        return None

    xs = np.asarray(x, dtype=np.int64)
    ys = np.asarray(y, dtype=np.int64)

    # Python ints from here on: n·Σx² products can exceed int64 for large surveys
    sum_x = int(xs.sum())
    sum_y = int(ys.sum())
    sum_xy = int(np.dot(xs, ys))
    sum_x2 = int(np.dot(xs, xs))
    sum_y2 = int(np.dot(ys, ys))

    numerator = n * sum_xy - sum_x * sum_y
    denominator_sq = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)

    if denominator_sq == 0:
        return 0.0

    r = numerator / math.sqrt(denominator_sq)

    # Clamp to absorb floating point drift
    return max(-1.0, min(1.0, r))
