"""Tests for CSV response import."""

from pathlib import Path

from surveylens.sources.csv import load_responses_csv
from surveylens.survey.models import ANONYMOUS_FINGERPRINT
from surveylens.survey.questions import QuestionCatalog


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "responses.csv"
    path.write_text(content)
    return path


class TestLoadResponsesCsv:
    """Tests for load_responses_csv."""

    def test_loads_rows(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(
            tmp_path,
            "sleepHours,stressLevel,moodRating,fingerprint_hash\n"
            "5,2,6,abc\n"
            "3,,4,\n",
        )

        result = load_responses_csv(path, catalog)

        assert result.success
        first, second = result.unwrap()
        assert first.answers == {"sleepHours": 5, "stressLevel": 2, "moodRating": 6}
        assert first.fingerprint_hash == "abc"
        assert second.answers["stressLevel"] is None
        assert second.fingerprint_hash == ANONYMOUS_FINGERPRINT

    def test_fingerprint_column_optional(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "moodRating,sleepHours,stressLevel\n1,2,3\n")

        [submission] = load_responses_csv(path, catalog).unwrap()

        assert submission.answers == {"sleepHours": 2, "stressLevel": 3, "moodRating": 1}

    def test_whole_number_floats_accepted(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel,moodRating\n4.0,2,7\n")

        [submission] = load_responses_csv(path, catalog).unwrap()

        assert submission.answers["sleepHours"] == 4

    def test_header_only(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel,moodRating\n")
        result = load_responses_csv(path, catalog)
        assert result.success
        assert result.value == []

    def test_unknown_column(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel,moodRating,shoeSize\n1,2,3,4\n")

        result = load_responses_csv(path, catalog)

        assert not result.success
        assert "shoeSize" in result.error

    def test_missing_column(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel\n1,2\n")

        result = load_responses_csv(path, catalog)

        assert not result.success
        assert "moodRating" in result.error

    def test_out_of_range_reports_row(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel,moodRating\n1,2,3\n1,9,3\n")

        result = load_responses_csv(path, catalog)

        assert not result.success
        assert result.error.startswith("Row 3:")

    def test_fractional_answer(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel,moodRating\n1,2.5,3\n")

        result = load_responses_csv(path, catalog)

        assert not result.success
        assert "whole numbers" in result.error

    def test_text_answer(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "sleepHours,stressLevel,moodRating\n1,lots,3\n")

        result = load_responses_csv(path, catalog)

        assert not result.success
        assert "not a number" in result.error

    def test_empty_file(self, tmp_path: Path, catalog: QuestionCatalog):
        path = _write(tmp_path, "")

        result = load_responses_csv(path, catalog)

        assert not result.success
        assert "Could not read" in result.error
