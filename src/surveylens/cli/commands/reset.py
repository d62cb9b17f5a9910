"""Reset command - delete all stored responses."""

from __future__ import annotations

from typing import Annotated

import typer

from surveylens.cli.common import DatabaseOption, connection_config, console
from surveylens.core.connections import ConnectionManager
from surveylens.storage import reset_database
from surveylens.storage.responses import count_responses


def reset(
    db: DatabaseOption = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Skip confirmation prompt",
        ),
    ] = False,
) -> None:
    """Reset the response database by dropping and recreating its tables."""
    config = connection_config(db)

    sqlite_path = config.sqlite_path
    if sqlite_path is not None and not sqlite_path.exists():
        console.print(f"[yellow]No database found at {sqlite_path}[/yellow]")
        return

    manager = ConnectionManager(config)
    manager.initialize()
    try:
        with manager.session_scope() as session:
            total = count_responses(session)

        console.print(f"\n[bold]{config.database_url}[/bold] holds {total} responses.")

        if not force:
            confirm = typer.confirm("\nDelete all responses?")
            if not confirm:
                console.print("[yellow]Cancelled[/yellow]")
                raise typer.Exit(0)

        reset_database(manager.engine)
    finally:
        manager.close()

    console.print(f"[green]Deleted {total} responses.[/green]")
