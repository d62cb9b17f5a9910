"""SurveyLens - pairwise correlations for ordinal survey answers.

Example:
    from surveylens import VariableSpec, compute_correlations

    variables = [VariableSpec(id="sleep", label="Sleep"), VariableSpec(id="mood", label="Mood")]
    dataset = {"sleep": [5, 6, None], "mood": [4, 7, 2]}
    top = compute_correlations(variables, dataset, top_k=5)
"""

__version__ = "0.1.0"

from surveylens.analysis.correlation import (
    CorrelationResult,
    DatasetValidationError,
    ScatterPoint,
    VariableSpec,
    compute_correlations,
)
from surveylens.core.models import Result

__all__ = [
    "CorrelationResult",
    "DatasetValidationError",
    "Result",
    "ScatterPoint",
    "VariableSpec",
    "compute_correlations",
    "__version__",
]
