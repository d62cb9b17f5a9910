"""SQLAlchemy models for survey response storage.

Note: This module defines database models (SQLAlchemy ORM).
For intake models (Pydantic), see survey.models.

One SurveyResponse row per submission; one ResponseAnswer row per
(submission, variable). A skipped question is stored as a NULL value so
that every response carries an answer slot for each catalog variable.
"""

from datetime import UTC, datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from surveylens.storage.base import Base


class SurveyResponse(Base):
    """One survey submission."""

    __tablename__ = "survey_responses"

    response_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fingerprint_hash: Mapped[str] = mapped_column(String, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )

    # Relationships
    answers: Mapped[list["ResponseAnswer"]] = relationship(
        back_populates="response", cascade="all, delete-orphan"
    )


class ResponseAnswer(Base):
    """Answer to one question within a submission (NULL when skipped)."""

    __tablename__ = "response_answers"
    __table_args__ = (
        UniqueConstraint("response_id", "variable_id", name="uq_response_variable"),
        CheckConstraint("value IS NULL OR (value >= 1 AND value <= 7)", name="value_range"),
    )

    answer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    response_id: Mapped[int] = mapped_column(
        ForeignKey("survey_responses.response_id", ondelete="CASCADE"), nullable=False
    )
    variable_id: Mapped[str] = mapped_column(String, nullable=False)
    value: Mapped[int | None] = mapped_column(Integer)

    response: Mapped[SurveyResponse] = relationship(back_populates="answers")
