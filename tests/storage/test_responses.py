"""Tests for response persistence."""

from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from surveylens.storage import ResponseAnswer, SurveyResponse, reset_database
from surveylens.storage.responses import (
    ResponseRow,
    count_responses,
    load_dataset,
    load_rows,
    rows_to_dataset,
    save_response,
)


class TestSaveResponse:
    """Tests for save_response."""

    def test_assigns_id_and_answers(self, session: Session):
        response = save_response(session, {"a": 3, "b": None}, "fp1")

        assert response.response_id is not None
        assert response.fingerprint_hash == "fp1"
        stored = session.execute(select(ResponseAnswer)).scalars().all()
        assert {(a.variable_id, a.value) for a in stored} == {("a", 3), ("b", None)}

    def test_duplicate_fingerprints_are_stored(self, session: Session):
        save_response(session, {"a": 1}, "same")
        save_response(session, {"a": 2}, "same")

        assert count_responses(session) == 2

    def test_out_of_range_rejected_by_database(self, session: Session):
        with pytest.raises(IntegrityError):
            save_response(session, {"a": 9}, "fp")
        session.rollback()

    def test_created_at_is_set(self, session: Session):
        response = save_response(session, {"a": 1}, "fp")
        assert isinstance(response.created_at, datetime)


class TestLoadRows:
    """Tests for load_rows and dataset assembly."""

    def test_rows_in_submission_order(self, session: Session):
        save_response(session, {"a": 1, "b": 2}, "first")
        save_response(session, {"a": 3, "b": None}, "second")

        rows = load_rows(session)

        assert [row.fingerprint_hash for row in rows] == ["first", "second"]
        assert rows[1].value("a") == 3
        assert rows[1].value("b") is None
        assert rows[1].value("never_asked") is None

    def test_load_dataset_aligns_columns(self, session: Session):
        save_response(session, {"a": 1, "b": 2}, "r1")
        save_response(session, {"a": None, "b": 5}, "r2")
        save_response(session, {"a": 7, "b": 6}, "r3")

        dataset = load_dataset(session, ["a", "b"])

        assert dataset == {"a": [1, None, 7], "b": [2, 5, 6]}

    def test_variable_added_later_is_skipped(self, session: Session):
        save_response(session, {"a": 4}, "old")

        dataset = load_dataset(session, ["a", "new"])

        assert dataset == {"a": [4], "new": [None]}

    def test_empty_database(self, session: Session):
        assert load_rows(session) == []
        assert load_dataset(session, ["a"]) == {"a": []}
        assert count_responses(session) == 0


class TestRowsToDataset:
    """Tests for rows_to_dataset."""

    def test_pivot(self):
        created = datetime(2024, 1, 1)
        rows = [
            ResponseRow(1, "x", created, {"a": 1, "b": None}),
            ResponseRow(2, "y", created, {"b": 3}),
        ]

        assert rows_to_dataset(rows, ["b", "a"]) == {"b": [None, 3], "a": [1, None]}


class TestCascade:
    """Tests for schema behaviour."""

    def test_deleting_response_removes_answers(self, session: Session):
        response = save_response(session, {"a": 1, "b": 2}, "fp")

        session.delete(response)
        session.flush()

        assert session.execute(select(ResponseAnswer)).scalars().all() == []

    def test_reset_database(self, manager, session: Session):
        save_response(session, {"a": 1}, "fp")
        session.commit()

        reset_database(manager.engine)

        assert session.execute(select(SurveyResponse)).scalars().all() == []
