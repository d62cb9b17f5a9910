"""Main CLI application entry point."""

from __future__ import annotations

import typer

from surveylens.cli.commands import correlations, import_csv, questions, reset, status, submit

app = typer.Typer(
    name="surveylens",
    help="SurveyLens - collect 1-7 survey answers and rank how the questions correlate.",
    no_args_is_help=True,
)

# Register commands
app.command()(submit.submit)
app.command(name="import-csv")(import_csv.import_csv)
app.command()(correlations.correlations)
app.command()(status.status)
app.command()(questions.questions)
app.command()(reset.reset)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
