"""Pairwise correlation processor.

Runs every unordered variable pair through pairing, Pearson, classification
and scatter aggregation, then ranks the results.

Contract violations abort the whole computation with
DatasetValidationError; no partial result is ever returned.
"""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from itertools import combinations
from typing import Any

import numpy as np
from pydantic import ValidationError

from surveylens.analysis.correlation.algorithms import (
    aggregate_scatter,
    classify_direction,
    classify_strength,
    compute_pearson,
    pair_complete_cases,
    rank_correlations,
    validate_top_k,
)
from surveylens.analysis.correlation.models import (
    SCALE_MAX,
    SCALE_MIN,
    CorrelationResult,
    DatasetValidationError,
    VariableSpec,
)
from surveylens.core.logging import get_logger

logger = get_logger(__name__)

Dataset = Mapping[str, Sequence[int | None]]


def _coerce_variables(
    variables: Sequence[VariableSpec | Mapping[str, Any]],
) -> list[VariableSpec]:
    if not variables:
        raise DatasetValidationError("At least one variable is required")

    try:
        specs = [
            v if isinstance(v, VariableSpec) else VariableSpec.model_validate(v)
            for v in variables
        ]
    except ValidationError as e:
        raise DatasetValidationError(f"Invalid variable definition: {e}") from e

    seen: set[str] = set()
    for spec in specs:
        if spec.id in seen:
            raise DatasetValidationError(f"Duplicate variable id: {spec.id!r}")
        seen.add(spec.id)
    return specs


def _validate_answer(variable_id: str, index: int, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DatasetValidationError(
            f"Answer {index} of {variable_id!r} must be an integer or None, got {value!r}"
        )
    if not SCALE_MIN <= value <= SCALE_MAX:
        raise DatasetValidationError(
            f"Answer {index} of {variable_id!r} is out of range "
            f"[{SCALE_MIN}, {SCALE_MAX}]: {value}"
        )
    return int(value)


def validate_dataset(
    variables: Sequence[VariableSpec | Mapping[str, Any]],
    dataset: Dataset,
) -> tuple[list[VariableSpec], dict[str, list[int | None]]]:
    """Check the dataset against the variable list.

    Returns:
        The variable specs and a normalized copy of the dataset holding
        plain Python ints

    Raises:
        DatasetValidationError: On any contract violation
    """
    specs = _coerce_variables(variables)
    known = {spec.id for spec in specs}

    unknown = sorted(set(dataset) - known)
    if unknown:
        raise DatasetValidationError(f"Dataset references unknown variables: {unknown}")

    missing = [spec.id for spec in specs if spec.id not in dataset]
    if missing:
        raise DatasetValidationError(f"Dataset has no answers for variables: {missing}")

    lengths = {spec.id: len(dataset[spec.id]) for spec in specs}
    if len(set(lengths.values())) > 1:
        raise DatasetValidationError(f"Answer columns must all have the same length: {lengths}")

    normalized = {
        spec.id: [_validate_answer(spec.id, i, v) for i, v in enumerate(dataset[spec.id])]
        for spec in specs
    }
    return specs, normalized


def correlate_pair(
    var1: VariableSpec,
    var2: VariableSpec,
    values1: Sequence[int | None],
    values2: Sequence[int | None],
) -> CorrelationResult | None:
    """Correlate one variable pair.

    Returns:
        CorrelationResult, or None when no respondent answered both
    """
    sample = pair_complete_cases(values1, values2)
    if sample.size < 1:
        return None

    coefficient = compute_pearson(sample.x, sample.y)

    return CorrelationResult(
        variable1_id=var1.id,
        variable2_id=var2.id,
        variable1_label=var1.label,
        variable2_label=var2.label,
        coefficient=coefficient,
        strength=classify_strength(coefficient),
        direction=classify_direction(coefficient),
        sample_size=sample.size,
        scatter_points=aggregate_scatter(sample),
    )


def compute_correlations(
    variables: Sequence[VariableSpec | Mapping[str, Any]],
    dataset: Dataset,
    top_k: int,
) -> list[CorrelationResult]:
    """Compute and rank Pearson correlations for all variable pairs.

    Pairs are enumerated in the order of ``variables``; each unordered pair
    appears once. Pairs without a single shared respondent are omitted.

    Args:
        variables: Ordered variable specs (ids unique)
        dataset: Variable id -> answers aligned by respondent index
        top_k: Maximum number of results to return

    Returns:
        At most top_k results, strongest |r| first, absent coefficients last

    Raises:
        DatasetValidationError: On any contract violation
    """
    start_time = time.time()
    validate_top_k(top_k)
    specs, columns = validate_dataset(variables, dataset)

    results: list[CorrelationResult] = []
    for var1, var2 in combinations(specs, 2):
        result = correlate_pair(var1, var2, columns[var1.id], columns[var2.id])
        if result is not None:
            results.append(result)

    ranked = rank_correlations(results, top_k)

    respondents = len(columns[specs[0].id])
    logger.debug(
        "correlations_computed",
        variables=len(specs),
        respondents=respondents,
        pairs_emitted=len(results),
        returned=len(ranked),
        duration_seconds=time.time() - start_time,
    )
    return ranked


def compute_all_correlations(
    variables: Sequence[VariableSpec | Mapping[str, Any]],
    dataset: Dataset,
) -> list[CorrelationResult]:
    """Compute every emitted pair, ranked, without truncation."""
    pair_count = max(1, len(variables) * (len(variables) - 1) // 2)
    return compute_correlations(variables, dataset, top_k=pair_count)
