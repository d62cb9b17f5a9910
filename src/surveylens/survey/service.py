"""Survey service: submit answers and read back ranked correlations.

Functions take an open SQLAlchemy session; committing is the caller's
job (see ConnectionManager.session_scope).
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from surveylens.analysis.correlation import CorrelationResult, compute_correlations
from surveylens.core.config import get_settings
from surveylens.core.logging import get_logger
from surveylens.core.models import Result
from surveylens.storage.responses import count_responses, load_dataset, save_response
from surveylens.survey.models import SubmissionOutcome, SurveySubmission
from surveylens.survey.questions import QuestionCatalog

logger = get_logger(__name__)


def get_total_responses(session: Session) -> int:
    """Number of stored submissions."""
    return count_responses(session)


def get_correlations(
    session: Session,
    catalog: QuestionCatalog,
    top_k: int | None = None,
) -> Result[list[CorrelationResult]]:
    """Compute the strongest correlations over all stored responses.

    Args:
        session: Open database session
        catalog: Questions defining the variable set
        top_k: How many pairs to return (default: settings.top_k)

    Returns:
        Result containing at most top_k correlations (empty with no responses)
    """
    top_k = top_k if top_k is not None else get_settings().top_k
    try:
        total = count_responses(session)
        if total < 1:
            return Result.ok([])

        dataset = load_dataset(session, catalog.keys)
        correlations = compute_correlations(catalog.variables(), dataset, top_k)

        logger.info(
            "correlations_served",
            responses=total,
            returned=len(correlations),
        )
        return Result.ok(correlations)
    except Exception as e:
        logger.error("correlations_failed", error=str(e))
        return Result.fail(f"Correlation computation failed: {e}")


def submit_survey(
    session: Session,
    submission: SurveySubmission,
    catalog: QuestionCatalog,
    top_k: int | None = None,
) -> Result[SubmissionOutcome]:
    """Store a submission and return the refreshed top correlations.

    Answers for questions the catalog does not define are rejected;
    catalog questions the submission leaves out are stored as skipped.
    If the correlations cannot be recomputed, the submission still
    succeeds with no correlations and the error as a warning.
    """
    unknown = submission.unknown_keys(catalog)
    if unknown:
        return Result.fail(f"Unknown questions in submission: {', '.join(unknown)}")

    try:
        response = save_response(
            session,
            submission.normalized_answers(catalog),
            submission.fingerprint_hash,
        )
    except Exception as e:
        session.rollback()
        logger.error("submission_failed", error=str(e))
        return Result.fail(f"Failed to store submission: {e}")

    # The response stays stored when the refresh fails
    correlations_result = get_correlations(session, catalog, top_k)
    warnings = [] if correlations_result.success else [correlations_result.error or ""]

    outcome = SubmissionOutcome(
        response_id=response.response_id,
        already_submitted=False,
        correlations=correlations_result.value or [],
        total_responses=count_responses(session),
    )
    logger.info(
        "submission_stored",
        response_id=response.response_id,
        total_responses=outcome.total_responses,
    )
    return Result.ok(outcome, warnings=warnings)
