"""Pure correlation algorithms.

These functions operate on in-memory sequences and return immutable
records. No database, no I/O - just math.
"""

from surveylens.analysis.correlation.algorithms.classification import (
    STRENGTH_THRESHOLDS,
    classify_direction,
    classify_strength,
)
from surveylens.analysis.correlation.algorithms.pairing import pair_complete_cases
from surveylens.analysis.correlation.algorithms.pearson import compute_pearson
from surveylens.analysis.correlation.algorithms.ranking import rank_correlations, validate_top_k
from surveylens.analysis.correlation.algorithms.scatter import aggregate_scatter

__all__ = [
    # Pairing
    "pair_complete_cases",
    # Pearson
    "compute_pearson",
    # Classification
    "STRENGTH_THRESHOLDS",
    "classify_direction",
    "classify_strength",
    # Scatter
    "aggregate_scatter",
    # Ranking
    "rank_correlations",
    "validate_top_k",
]
