"""Status command - show stored response counts."""

from __future__ import annotations

from sqlalchemy import func, select

from surveylens.cli.common import (
    DatabaseOption,
    JsonFlag,
    QuestionsOption,
    connection_config,
    console,
    get_catalog,
    open_session,
)
from surveylens.storage.models import ResponseAnswer
from surveylens.storage.responses import count_responses


def status(
    db: DatabaseOption = None,
    questions: QuestionsOption = None,
    json_output: JsonFlag = False,
) -> None:
    """Show how many responses are stored and how complete they are.

    Examples:

        surveylens status

        surveylens status --json
    """
    catalog = get_catalog(questions)

    with open_session(db) as session:
        total = count_responses(session)
        answered_rows = session.execute(
            select(ResponseAnswer.variable_id, func.count())
            .where(ResponseAnswer.value.is_not(None))
            .group_by(ResponseAnswer.variable_id)
        ).all()

    answered = {variable_id: int(count) for variable_id, count in answered_rows}
    per_question = {key: answered.get(key, 0) for key in catalog.keys}

    if json_output:
        console.print_json(
            data={
                "database": connection_config(db).database_url,
                "totalResponses": total,
                "questions": len(catalog),
                "answered": per_question,
            }
        )
        return

    console.print(f"\n[bold]Database:[/bold] {connection_config(db).database_url}")
    console.print(f"[bold]Responses:[/bold] {total}")
    console.print(f"[bold]Questions:[/bold] {len(catalog)}\n")

    labels = catalog.labels()
    for key, count in per_question.items():
        console.print(f"  {labels[key]:<24} {count} answered")
