"""Correlation analysis module.

Pairwise Pearson correlation of ordinal (1-7) survey answers:
- Complete-case pairing of partially answered variables
- Pearson coefficient with a zero-denominator convention (r = 0)
- Strength / direction classification
- Scatter aggregation of identical answer pairs
- Ranking by |r| and truncation to the top results

Main entry point:
- compute_correlations: rank all variable pairs of a dataset
"""

from surveylens.analysis.correlation.algorithms import (
    STRENGTH_THRESHOLDS,
    aggregate_scatter,
    classify_direction,
    classify_strength,
    compute_pearson,
    pair_complete_cases,
    rank_correlations,
)
from surveylens.analysis.correlation.models import (
    SCALE_MAX,
    SCALE_MIN,
    CorrelationDirection,
    CorrelationResult,
    CorrelationStrength,
    DatasetValidationError,
    PairedSample,
    ScatterPoint,
    VariableSpec,
)
from surveylens.analysis.correlation.processor import (
    compute_all_correlations,
    compute_correlations,
    correlate_pair,
    validate_dataset,
)

__all__ = [
    # Processor (main entry points)
    "compute_correlations",
    "compute_all_correlations",
    "correlate_pair",
    "validate_dataset",
    # Algorithms
    "pair_complete_cases",
    "compute_pearson",
    "classify_strength",
    "classify_direction",
    "aggregate_scatter",
    "rank_correlations",
    "STRENGTH_THRESHOLDS",
    # Models
    "VariableSpec",
    "PairedSample",
    "ScatterPoint",
    "CorrelationResult",
    "CorrelationStrength",
    "CorrelationDirection",
    "DatasetValidationError",
    "SCALE_MIN",
    "SCALE_MAX",
]
