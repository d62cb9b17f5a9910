"""Import command - bulk load responses from CSV."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

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
from surveylens.sources.csv import load_responses_csv
from surveylens.storage.responses import count_responses, save_response


def import_csv(
    source: Annotated[
        Path,
        typer.Argument(
            help="CSV file with one column per question key",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    db: DatabaseOption = None,
    questions: QuestionsOption = None,
    verbose: VerboseOption = 0,
    log_format: LogFormatOption = "console",
) -> None:
    """Import survey responses from a CSV file.

    Blank cells are stored as skipped answers. The whole file is rejected
    if any row is invalid.

    Examples:

        surveylens import-csv responses.csv --db ./surveylens.db
    """
    setup_logging(verbose, log_format)
    catalog = get_catalog(questions)

    loaded = load_responses_csv(source, catalog)
    if not loaded.success:
        print_error(loaded.error or "")
        raise typer.Exit(1)

    submissions = loaded.value or []
    with log_context(command="import-csv", source=source.name), open_session(db) as session:
        for submission in submissions:
            save_response(
                session,
                submission.normalized_answers(catalog),
                submission.fingerprint_hash,
            )
        total = count_responses(session)

    console.print(
        f"[green]Imported {len(submissions)} responses from {source.name}[/green] "
        f"({total} responses total)"
    )
