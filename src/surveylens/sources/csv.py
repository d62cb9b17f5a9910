"""CSV import of survey responses.

Expected layout: one row per respondent, one column per catalog question
key, plus an optional ``fingerprint_hash`` column. Blank cells are
skipped answers.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from surveylens.core.logging import get_logger
from surveylens.core.models import Result
from surveylens.survey.models import ANONYMOUS_FINGERPRINT, SurveySubmission
from surveylens.survey.questions import QuestionCatalog

logger = get_logger(__name__)

FINGERPRINT_COLUMN = "fingerprint_hash"


def load_responses_csv(path: Path, catalog: QuestionCatalog) -> Result[list[SurveySubmission]]:
    """Read respondents from a CSV file.

    Args:
        path: CSV file to read
        catalog: Questions the columns must match

    Returns:
        Result containing one SurveySubmission per data row
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        return Result.fail(f"Could not read {path}: {e}")

    columns = [str(c).strip() for c in df.columns]
    df.columns = columns

    unknown = sorted(set(columns) - set(catalog.keys) - {FINGERPRINT_COLUMN})
    if unknown:
        return Result.fail(f"Unknown question columns: {', '.join(unknown)}")

    missing = [key for key in catalog.keys if key not in columns]
    if missing:
        return Result.fail(f"Missing question columns: {', '.join(missing)}")

    submissions: list[SurveySubmission] = []
    for row_number, record in enumerate(df.to_dict(orient="records"), start=2):
        try:
            answers = {key: _parse_answer(record[key]) for key in catalog.keys}
            fingerprint = (record.get(FINGERPRINT_COLUMN) or "").strip()
            submissions.append(
                SurveySubmission(
                    answers=answers,
                    fingerprint_hash=fingerprint or ANONYMOUS_FINGERPRINT,
                )
            )
        except (ValueError, ValidationError) as e:
            return Result.fail(f"Row {row_number}: {e}")

    logger.info("csv_loaded", path=str(path), rows=len(submissions))
    return Result.ok(submissions)


def _parse_answer(raw: str) -> int | None:
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError as e:
        raise ValueError(f"not a number: {raw!r}") from e
    if not value.is_integer():
        raise ValueError(f"answers must be whole numbers: {raw!r}")
    return int(value)
