"""Tests for the question catalog."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from surveylens.survey.questions import (
    QuestionCatalog,
    QuestionCatalogError,
    load_question_catalog,
)


class TestQuestionCatalog:
    """Tests for QuestionCatalog."""

    def test_keys_and_labels_in_order(self, catalog: QuestionCatalog):
        assert catalog.keys == ["sleepHours", "stressLevel", "moodRating"]
        assert catalog.labels()["moodRating"] == "Mood"
        assert len(catalog) == 3

    def test_variables(self, catalog: QuestionCatalog):
        variables = catalog.variables()

        assert [v.id for v in variables] == catalog.keys
        assert variables[0].label == "Sleep"

    def test_get(self, catalog: QuestionCatalog):
        assert catalog.get("stressLevel").label == "Stress"
        assert catalog.get("missing") is None

    def test_rejects_duplicate_keys(self):
        with pytest.raises(ValidationError, match="Duplicate question key"):
            QuestionCatalog.from_dict(
                {"questions": [{"key": "a", "label": "A"}, {"key": "a", "label": "B"}]}
            )

    def test_rejects_empty_catalog(self):
        with pytest.raises(ValidationError):
            QuestionCatalog.from_dict({"questions": []})

    def test_rejects_bad_key(self):
        with pytest.raises(ValidationError):
            QuestionCatalog.from_dict({"questions": [{"key": "has space", "label": "A"}]})


class TestLoadQuestionCatalog:
    """Tests for load_question_catalog."""

    def test_loads_yaml(self, catalog_file: Path):
        catalog = load_question_catalog(catalog_file)

        assert catalog.version == "test"
        assert catalog.keys == ["sleepHours", "stressLevel", "moodRating"]
        assert catalog.get("sleepHours").low_label == "< 4h"

    def test_default_catalog(self):
        """The shipped catalog holds the sixteen survey questions."""
        catalog = load_question_catalog()

        assert len(catalog) == 16
        assert catalog.keys[0] == "sleepHours"
        assert "socialBattery" in catalog.keys

    def test_default_catalog_is_cached(self):
        assert load_question_catalog() is load_question_catalog()

    def test_configured_path(self, catalog_file: Path, monkeypatch):
        monkeypatch.setenv("SURVEYLENS_CONFIG_PATH", str(catalog_file.parent))

        assert len(load_question_catalog()) == 3

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(QuestionCatalogError, match="not found"):
            load_question_catalog(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("questions: [unclosed")

        with pytest.raises(QuestionCatalogError, match="invalid YAML"):
            load_question_catalog(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(QuestionCatalogError, match="mapping"):
            load_question_catalog(path)

    def test_invalid_catalog(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("version: 1\nquestions: []\n")

        with pytest.raises(QuestionCatalogError, match="invalid catalog") as exc_info:
            load_question_catalog(path)

        assert exc_info.value.path == path
