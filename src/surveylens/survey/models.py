"""Survey intake models.

- SurveySubmission: one respondent's answers plus their identity token
- SubmissionOutcome: what a submitter gets back
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from surveylens.analysis.correlation.models import SCALE_MAX, SCALE_MIN, CorrelationResult
from surveylens.survey.questions import QuestionCatalog

ANONYMOUS_FINGERPRINT = "anonymous"


class SurveySubmission(BaseModel):
    """Answers from a single respondent.

    Values are on the 1-7 scale; None marks a skipped question.
    """

    model_config = ConfigDict(frozen=True)

    answers: dict[str, StrictInt | None]
    fingerprint_hash: str = Field(default=ANONYMOUS_FINGERPRINT, min_length=1)

    @field_validator("answers")
    @classmethod
    def _answers_in_scale(cls, answers: dict[str, int | None]) -> dict[str, int | None]:
        for key, value in answers.items():
            if value is None:
                continue
            if not SCALE_MIN <= value <= SCALE_MAX:
                raise ValueError(
                    f"Answer for {key!r} must be between {SCALE_MIN} and {SCALE_MAX}, got {value}"
                )
        return answers

    def unknown_keys(self, catalog: QuestionCatalog) -> list[str]:
        """Answer keys that are not catalog questions."""
        known = set(catalog.keys)
        return sorted(key for key in self.answers if key not in known)

    def normalized_answers(self, catalog: QuestionCatalog) -> dict[str, int | None]:
        """One slot per catalog question, in catalog order; missing answers are skipped."""
        return {key: self.answers.get(key) for key in catalog.keys}


class SubmissionOutcome(BaseModel):
    """Result of storing a submission."""

    response_id: int
    already_submitted: bool = False
    correlations: list[CorrelationResult] = Field(default_factory=list)
    total_responses: int = 0
