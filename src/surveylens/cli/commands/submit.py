"""Submit command - store one respondent's answers."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from surveylens.cli.commands.correlations import render_correlations
from surveylens.cli.common import (
    DatabaseOption,
    LogFormatOption,
    QuestionsOption,
    VerboseOption,
    console,
    get_catalog,
    open_session,
    print_error,
    setup_logging,
)
from surveylens.core.logging import log_context
from surveylens.survey.fingerprint import compute_fingerprint
from surveylens.survey.models import ANONYMOUS_FINGERPRINT, SurveySubmission
from surveylens.survey.service import submit_survey


def _split_pair(pair: str) -> tuple[str, str]:
    key, sep, raw = pair.partition("=")
    key = key.strip()
    if not sep or not key:
        raise typer.BadParameter(f"Expected KEY=VALUE, got {pair!r}")
    return key, raw.strip()


def parse_answers(pairs: list[str]) -> dict[str, int | None]:
    """Parse ``key=value`` strings; an empty value marks a skipped question.

    Raises:
        typer.BadParameter: On malformed pairs or non-integer values
    """
    answers: dict[str, int | None] = {}
    for pair in pairs:
        key, raw = _split_pair(pair)
        if not raw:
            answers[key] = None
            continue
        try:
            answers[key] = int(raw)
        except ValueError as e:
            raise typer.BadParameter(f"Answer for {key!r} must be an integer, got {raw!r}") from e
    return answers


def resolve_fingerprint(fingerprint: str, client: list[str] | None) -> str:
    """Pick the stored identity token.

    Client components (``screen=1920x1080``, ``timezone=UTC``, ...) are
    hashed in the order given; otherwise the explicit token is used.

    Raises:
        typer.BadParameter: If both are given or a component is malformed
    """
    if not client:
        return fingerprint
    if fingerprint != ANONYMOUS_FINGERPRINT:
        raise typer.BadParameter("Use either --fingerprint or --client, not both")
    return compute_fingerprint(dict(_split_pair(pair) for pair in client))


def submit(
    answer: Annotated[
        list[str],
        typer.Option(
            "--answer",
            "-a",
            help="Answer as KEY=VALUE (1-7); repeat per question, KEY= to skip",
        ),
    ],
    fingerprint: Annotated[
        str,
        typer.Option(
            "--fingerprint",
            help="Identity token stored with the submission",
        ),
    ] = ANONYMOUS_FINGERPRINT,
    client: Annotated[
        list[str] | None,
        typer.Option(
            "--client",
            help="Client characteristic as KEY=VALUE, hashed into the fingerprint; repeatable",
        ),
    ] = None,
    db: DatabaseOption = None,
    questions: QuestionsOption = None,
    verbose: VerboseOption = 0,
    log_format: LogFormatOption = "console",
) -> None:
    """Submit answers and show the refreshed top correlations.

    Questions not mentioned are stored as skipped.

    Examples:

        surveylens submit -a sleepHours=6 -a stressLevel=3 -a moodRating=5

        surveylens submit -a moodRating=4 --client screen=1920x1080 --client timezone=UTC
    """
    setup_logging(verbose, log_format)
    catalog = get_catalog(questions)

    try:
        submission = SurveySubmission(
            answers=parse_answers(answer),
            fingerprint_hash=resolve_fingerprint(fingerprint, client),
        )
    except ValueError as e:
        print_error(f"Invalid submission: {e}")
        raise typer.Exit(1) from e

    with log_context(command="submit"), open_session(db) as session:
        result = submit_survey(session, submission, catalog)

    if not result.success:
        print_error(result.error or "")
        raise typer.Exit(1)

    outcome = result.unwrap()
    console.print(
        f"[green]Stored response #{outcome.response_id}[/green] "
        f"({outcome.total_responses} responses total)\n"
    )
    for warning in result.warnings:
        console.print(f"[yellow]Correlations unavailable: {escape(warning)}[/yellow]")
    if outcome.correlations:
        render_correlations(outcome.correlations)
