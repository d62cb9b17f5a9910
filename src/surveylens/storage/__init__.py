"""Storage layer for survey responses.

This module provides:
- Base: SQLAlchemy declarative base for all models
- SurveyResponse, ResponseAnswer: Response entity models
- init_database, reset_database: Schema management

Note: Engine and session management is handled by core.connections.ConnectionManager.
"""

from surveylens.storage.base import (
    Base,
    init_database,
    metadata_obj,
    reset_database,
)
from surveylens.storage.models import ResponseAnswer, SurveyResponse

__all__ = [
    # Base and metadata
    "Base",
    "metadata_obj",
    # Entities
    "SurveyResponse",
    "ResponseAnswer",
    # Database management
    "init_database",
    "reset_database",
]
