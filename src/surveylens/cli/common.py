"""Shared CLI utilities and constants."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from sqlalchemy.orm import Session

from surveylens.core.config import get_settings
from surveylens.core.connections import ConnectionConfig, ConnectionManager
from surveylens.core.logging import configure_logging
from surveylens.survey.questions import (
    QuestionCatalog,
    QuestionCatalogError,
    load_question_catalog,
)

# Load .env file from current directory (SURVEYLENS_* overrides)
load_dotenv()

# Shared console instance
console = Console()

# Common type aliases for typer options
DatabaseOption = Annotated[
    Path | None,
    typer.Option(
        "--db",
        help="SQLite database file (default: SURVEYLENS_DATABASE_URL)",
        dir_okay=False,
        resolve_path=True,
    ),
]

QuestionsOption = Annotated[
    Path | None,
    typer.Option(
        "--questions",
        help="Question catalog YAML (default: config/questions.yaml)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]

LogFormatOption = Annotated[
    str,
    typer.Option(
        "--log-format",
        help="Log output format (console or json)",
    ),
]


def setup_logging(verbosity: int = 0, log_format: str = "console") -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2+=DEBUG
        log_format: "console" for development, "json" for services
    """
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = "WARNING"

    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def print_error(message: str) -> None:
    """Print an error message in red without interpreting its brackets as markup."""
    console.print(f"[red]{escape(message)}[/red]")


def connection_config(db_path: Path | None) -> ConnectionConfig:
    """Config for an explicit database file, else the configured URL."""
    if db_path is not None:
        return ConnectionConfig.for_file(db_path)
    return ConnectionConfig.for_url(get_settings().database_url)


@contextmanager
def open_session(db_path: Path | None) -> Generator[Session]:
    """Open a committed-on-exit session against the selected database."""
    manager = ConnectionManager(connection_config(db_path))
    try:
        manager.initialize()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    try:
        with manager.session_scope() as session:
            yield session
    finally:
        manager.close()


def get_catalog(questions_path: Path | None) -> QuestionCatalog:
    """Load the question catalog or exit with a readable error."""
    try:
        return load_question_catalog(questions_path)
    except QuestionCatalogError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
