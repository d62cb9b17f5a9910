"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

from surveylens.core.config import get_settings
from surveylens.core.connections import ConnectionConfig, ConnectionManager
from surveylens.core.logging import configure_logging
from surveylens.survey.questions import QuestionCatalog, clear_catalog_cache

CATALOG_YAML = """\
version: "test"
questions:
  - key: sleepHours
    label: Sleep
    low_label: "< 4h"
    high_label: "10h+"
  - key: stressLevel
    label: Stress
  - key: moodRating
    label: Mood
"""


@pytest.fixture(autouse=True)
def _reset_state() -> Generator[None]:
    """Isolate tests from cached settings, catalogs and logging configuration."""
    get_settings.cache_clear()
    clear_catalog_cache()
    yield
    get_settings.cache_clear()
    clear_catalog_cache()
    # CLI commands and capture fixtures rebind the log stream
    configure_logging(log_level="WARNING")


@pytest.fixture
def manager() -> Generator[ConnectionManager]:
    """Initialized connection manager over a fresh in-memory database."""
    mgr = ConnectionManager(ConnectionConfig.in_memory())
    mgr.initialize()
    yield mgr
    mgr.close()


@pytest.fixture
def session(manager: ConnectionManager) -> Generator[Session]:
    """Session tied to the test's in-memory database."""
    with manager.session_scope() as session:
        yield session


@pytest.fixture
def catalog() -> QuestionCatalog:
    """Three-question catalog: sleepHours, stressLevel, moodRating."""
    return QuestionCatalog.from_dict(
        {
            "version": "test",
            "questions": [
                {"key": "sleepHours", "label": "Sleep"},
                {"key": "stressLevel", "label": "Stress"},
                {"key": "moodRating", "label": "Mood"},
            ],
        }
    )


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """The three-question catalog written as YAML."""
    path = tmp_path / "questions.yaml"
    path.write_text(CATALOG_YAML)
    return path
