"""Scatter aggregation: collapse identical answer pairs into counted points."""

import numpy as np

from surveylens.analysis.correlation.models import PairedSample, ScatterPoint


def aggregate_scatter(sample: PairedSample) -> tuple[ScatterPoint, ...]:
    """Group identical (x, y) coordinates and count occurrences.

    Consumers must not rely on point order. Points come back sorted by
    (x, y) so repeated runs render identically.
    """
    if sample.size == 0:
        return ()

    coords = np.column_stack((np.asarray(sample.x), np.asarray(sample.y)))
    unique, counts = np.unique(coords, axis=0, return_counts=True)

    return tuple(
        ScatterPoint(x=int(x), y=int(y), count=int(count))
        for (x, y), count in zip(unique, counts, strict=True)
    )
