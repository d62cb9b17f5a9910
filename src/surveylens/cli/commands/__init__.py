"""CLI command implementations."""

from surveylens.cli.commands import (
    correlations,
    import_csv,
    questions,
    reset,
    status,
    submit,
)

__all__ = [
    "correlations",
    "import_csv",
    "questions",
    "reset",
    "status",
    "submit",
]
