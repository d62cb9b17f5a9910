"""Response persistence and dataset assembly.

Reads stored submissions back as respondent rows and turns rows into the
column-per-variable dataset consumed by the correlation processor.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from surveylens.core.logging import get_logger
from surveylens.storage.models import ResponseAnswer, SurveyResponse

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResponseRow:
    """A stored respondent's answers, keyed by variable id."""

    response_id: int
    fingerprint_hash: str
    created_at: datetime
    answers: Mapping[str, int | None] = field(default_factory=dict)

    def value(self, variable_id: str) -> int | None:
        """Answer for a variable, None when skipped or not asked."""
        return self.answers.get(variable_id)


def save_response(
    session: Session,
    answers: Mapping[str, int | None],
    fingerprint_hash: str,
) -> SurveyResponse:
    """Persist one submission (flushes to obtain the response id).

    Duplicate fingerprints are stored like any other response.
    """
    response = SurveyResponse(fingerprint_hash=fingerprint_hash)
    response.answers = [
        ResponseAnswer(variable_id=variable_id, value=value)
        for variable_id, value in answers.items()
    ]
    session.add(response)
    session.flush()

    logger.debug(
        "response_saved",
        response_id=response.response_id,
        answered=sum(1 for v in answers.values() if v is not None),
        skipped=sum(1 for v in answers.values() if v is None),
    )
    return response


def count_responses(session: Session) -> int:
    """Total number of stored submissions."""
    result = session.execute(select(func.count()).select_from(SurveyResponse))
    return int(result.scalar() or 0)


def load_rows(session: Session) -> list[ResponseRow]:
    """Load every stored response in submission order."""
    stmt = (
        select(SurveyResponse)
        .options(selectinload(SurveyResponse.answers))
        .order_by(SurveyResponse.response_id)
    )
    responses = session.execute(stmt).scalars().all()

    return [
        ResponseRow(
            response_id=response.response_id,
            fingerprint_hash=response.fingerprint_hash,
            created_at=response.created_at,
            answers={answer.variable_id: answer.value for answer in response.answers},
        )
        for response in responses
    ]


def rows_to_dataset(
    rows: Sequence[ResponseRow],
    variable_ids: Sequence[str],
) -> dict[str, list[int | None]]:
    """Pivot respondent rows into aligned answer columns.

    Slot i of every column belongs to rows[i]. Variables a row never
    answered (e.g. added to the catalog later) are treated as skipped.
    """
    return {
        variable_id: [row.value(variable_id) for row in rows]
        for variable_id in variable_ids
    }


def load_dataset(session: Session, variable_ids: Sequence[str]) -> dict[str, list[int | None]]:
    """Load all stored responses as a column-per-variable dataset."""
    return rows_to_dataset(load_rows(session), variable_ids)
