"""Questions command - list the question catalog."""

from __future__ import annotations

from rich.table import Table as RichTable

from surveylens.cli.common import QuestionsOption, console, get_catalog


def questions(questions: QuestionsOption = None) -> None:
    """List the survey questions and their 1-7 scale anchors."""
    catalog = get_catalog(questions)

    table = RichTable(title=f"Question catalog v{catalog.version}")
    table.add_column("Key")
    table.add_column("Label")
    table.add_column("1")
    table.add_column("7")

    for question in catalog.questions:
        table.add_row(
            question.key,
            f"{question.icon} {question.label}".strip(),
            question.low_label,
            question.high_label,
        )

    console.print(table)
