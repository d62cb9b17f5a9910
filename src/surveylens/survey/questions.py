"""Question catalog configuration.

Loads the ordered list of survey questions from YAML. The catalog is the
single source of variable ids and labels handed to the correlation
processor.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from surveylens.analysis.correlation.models import VariableSpec
from surveylens.core.config import get_settings
from surveylens.core.logging import get_logger

logger = get_logger(__name__)


class QuestionCatalogError(Exception):
    """Error loading a question catalog."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class QuestionConfig(BaseModel):
    """One slider question on the 1-7 scale."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    label: str
    description: str = ""
    low_label: str = ""
    high_label: str = ""
    icon: str = ""

    def to_variable(self) -> VariableSpec:
        return VariableSpec(id=self.key, label=self.label)


class QuestionCatalog(BaseModel):
    """Ordered, fixed set of survey questions."""

    model_config = ConfigDict(frozen=True)

    version: str = "1.0"
    questions: tuple[QuestionConfig, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_keys(self) -> QuestionCatalog:
        seen: set[str] = set()
        for question in self.questions:
            if question.key in seen:
                raise ValueError(f"Duplicate question key: {question.key}")
            seen.add(question.key)
        return self

    @property
    def keys(self) -> list[str]:
        return [q.key for q in self.questions]

    def variables(self) -> list[VariableSpec]:
        """Variable specs in catalog order."""
        return [q.to_variable() for q in self.questions]

    def labels(self) -> dict[str, str]:
        return {q.key: q.label for q in self.questions}

    def get(self, key: str) -> QuestionConfig | None:
        for question in self.questions:
            if question.key == key:
                return question
        return None

    def __len__(self) -> int:
        return len(self.questions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionCatalog:
        """Create a catalog from a parsed YAML document."""
        return cls.model_validate(
            {
                "version": str(data.get("version", "1.0")),
                "questions": data.get("questions", []),
            }
        )


_cached_catalog: QuestionCatalog | None = None


def load_question_catalog(config_path: Path | None = None) -> QuestionCatalog:
    """Load the question catalog from YAML.

    Without a path, the configured catalog (settings.questions_path) is
    loaded once and cached.

    Args:
        config_path: Optional path to a catalog file

    Returns:
        QuestionCatalog instance

    Raises:
        QuestionCatalogError: If the file is missing or malformed
    """
    global _cached_catalog

    if config_path is None and _cached_catalog is not None:
        return _cached_catalog

    path = config_path or get_settings().questions_path
    if not path.exists():
        raise QuestionCatalogError(path, "question catalog not found")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise QuestionCatalogError(path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise QuestionCatalogError(path, "expected a mapping at the top level")

    try:
        catalog = QuestionCatalog.from_dict(data)
    except ValidationError as e:
        raise QuestionCatalogError(path, f"invalid catalog: {e}") from e

    logger.debug("question_catalog_loaded", path=str(path), questions=len(catalog))

    if config_path is None:
        _cached_catalog = catalog
    return catalog


def clear_catalog_cache() -> None:
    """Clear the catalog cache (useful for testing)."""
    global _cached_catalog
    _cached_catalog = None
