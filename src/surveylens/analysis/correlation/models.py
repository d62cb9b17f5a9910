"""Correlation Analysis Models.

Data structures for pairwise correlation of ordinal survey answers:
- VariableSpec: a survey variable (stable id + human-readable label)
- PairedSample: complete-case values of two variables
- ScatterPoint: a distinct (x, y) answer combination with its count
- CorrelationResult: the full result for one variable pair

All models are immutable; they are created fresh per computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Inclusive answer scale
SCALE_MIN = 1
SCALE_MAX = 7


class DatasetValidationError(ValueError):
    """Input dataset violates the correlation engine's contract.

    Raised for mismatched sequence lengths, out-of-range or non-integer
    answers, duplicate or unknown variable ids, and invalid ranking limits.
    """


class CorrelationStrength(str, Enum):
    """Coarse classification of |r|."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    NONE = "none"


class CorrelationDirection(str, Enum):
    """Sign of the coefficient; NONE when no coefficient exists."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NONE = "none"


class VariableSpec(BaseModel):
    """A survey variable: stable key plus display label."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str


@dataclass(frozen=True)
class PairedSample:
    """Complete-case pairing of two variables.

    Only respondents who answered both variables contribute, in their
    original order.
    """

    x: tuple[int, ...]
    y: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise DatasetValidationError(
                f"Paired sample sides differ in length: {len(self.x)} != {len(self.y)}"
            )

    def __len__(self) -> int:
        return len(self.x)

    @property
    def size(self) -> int:
        return len(self.x)


class _WireModel(BaseModel):
    """Frozen model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire shape consumed by presentation layers."""
        return self.model_dump(by_alias=True, mode="json")


class ScatterPoint(_WireModel):
    """A distinct answer combination and how many respondents gave it."""

    x: int = Field(ge=SCALE_MIN, le=SCALE_MAX)
    y: int = Field(ge=SCALE_MIN, le=SCALE_MAX)
    count: int = Field(ge=1)


class CorrelationResult(_WireModel):
    """Pearson correlation between two survey variables."""

    variable1_id: str
    variable2_id: str
    variable1_label: str
    variable2_label: str

    # None when fewer than two respondents answered both variables
    coefficient: float | None = Field(default=None, ge=-1.0, le=1.0)
    strength: CorrelationStrength
    direction: CorrelationDirection

    sample_size: int = Field(ge=0)
    scatter_points: tuple[ScatterPoint, ...] = ()

    @model_validator(mode="after")
    def _consistent_sample(self) -> CorrelationResult:
        if (self.coefficient is None) != (self.sample_size < 2):
            raise ValueError(
                f"coefficient must be absent exactly when sample_size < 2 "
                f"(coefficient={self.coefficient}, sample_size={self.sample_size})"
            )
        total = sum(point.count for point in self.scatter_points)
        if total != self.sample_size:
            raise ValueError(
                f"scatter point counts sum to {total}, expected sample_size {self.sample_size}"
            )
        return self

    @property
    def has_coefficient(self) -> bool:
        return self.coefficient is not None

    @property
    def magnitude(self) -> float | None:
        """|r|, or None when no coefficient exists."""
        if self.coefficient is None:
            return None
        return abs(self.coefficient)
