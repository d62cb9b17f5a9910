"""Survey intake: question catalog, submissions, fingerprints and the service API."""

from surveylens.survey.fingerprint import compute_fingerprint
from surveylens.survey.models import ANONYMOUS_FINGERPRINT, SubmissionOutcome, SurveySubmission
from surveylens.survey.questions import (
    QuestionCatalog,
    QuestionCatalogError,
    QuestionConfig,
    clear_catalog_cache,
    load_question_catalog,
)
from surveylens.survey.service import get_correlations, get_total_responses, submit_survey

__all__ = [
    # Catalog
    "QuestionCatalog",
    "QuestionCatalogError",
    "QuestionConfig",
    "clear_catalog_cache",
    "load_question_catalog",
    # Intake
    "ANONYMOUS_FINGERPRINT",
    "SurveySubmission",
    "SubmissionOutcome",
    "compute_fingerprint",
    # Service
    "get_correlations",
    "get_total_responses",
    "submit_survey",
]
