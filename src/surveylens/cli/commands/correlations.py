"""Correlations command - rank variable pairs over stored responses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

import typer
from rich.table import Table as RichTable

from surveylens.analysis.correlation import CorrelationResult
from surveylens.analysis.correlation.formatting import (
    direction_label,
    sample_size_notice,
    strength_label,
)
from surveylens.cli.common import (
    DatabaseOption,
    JsonFlag,
    LogFormatOption,
    QuestionsOption,
    VerboseOption,
    console,
    get_catalog,
    open_session,
    print_error,
    setup_logging,
)
from surveylens.core.config import get_settings
from surveylens.core.logging import log_context
from surveylens.survey.service import get_correlations, get_total_responses

_STRENGTH_STYLES = {
    "strong": "bold green",
    "moderate": "cyan",
    "weak": "blue",
    "none": "dim",
}


def correlations(
    db: DatabaseOption = None,
    questions: QuestionsOption = None,
    top: Annotated[
        int | None,
        typer.Option(
            "--top",
            "-k",
            min=1,
            help="Number of pairs to show (default: SURVEYLENS_TOP_K)",
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            help="Show every pair that shares at least one respondent",
        ),
    ] = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
    log_format: LogFormatOption = "console",
) -> None:
    """Show the strongest correlations between survey questions.

    Examples:

        surveylens correlations

        surveylens correlations --top 10

        surveylens correlations --all --json
    """
    setup_logging(verbose, log_format)
    catalog = get_catalog(questions)

    if show_all:
        top_k = max(1, len(catalog) * (len(catalog) - 1) // 2)
    else:
        top_k = top if top is not None else get_settings().top_k

    with log_context(command="correlations"), open_session(db) as session:
        result = get_correlations(session, catalog, top_k)
        total = get_total_responses(session)

    if not result.success:
        print_error(result.error or "")
        raise typer.Exit(1)

    pairs = result.value or []
    if json_output:
        console.print_json(
            data={"totalResponses": total, "correlations": [r.to_dict() for r in pairs]}
        )
        return

    if not pairs:
        console.print("[yellow]No correlations yet. Submit some responses first.[/yellow]")
        return

    console.print(f"\n[bold]Top correlations[/bold] ({total} responses)\n")
    render_correlations(pairs)


def render_correlations(pairs: Sequence[CorrelationResult]) -> None:
    """Print ranked correlations as a rich table."""
    table = RichTable()
    table.add_column("#", justify="right")
    table.add_column("Pair")
    table.add_column("r", justify="right")
    table.add_column("Strength")
    table.add_column("Direction")
    table.add_column("n", justify="right")
    table.add_column("Note")

    for rank, pair in enumerate(pairs, start=1):
        coefficient = "-" if pair.coefficient is None else f"{pair.coefficient:+.3f}"
        style = _STRENGTH_STYLES[pair.strength.value]
        notice = sample_size_notice(pair.sample_size)
        note = {"insufficient": "not enough data", "small": "small sample"}.get(notice or "", "")
        table.add_row(
            str(rank),
            f"{pair.variable1_label} ↔ {pair.variable2_label}",
            coefficient,
            f"[{style}]{strength_label(pair.strength)}[/{style}]",
            direction_label(pair.direction),
            str(pair.sample_size),
            note,
        )

    console.print(table)
