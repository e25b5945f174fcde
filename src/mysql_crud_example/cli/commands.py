"""
MySQL CRUD example CLI.

Runs the full walkthrough and prints the users left in the table.
"""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mysql_crud_example.errors import RuntimeHostError
from mysql_crud_example.models import ModelUser
from mysql_crud_example.runtime import ModelDatabaseConfig, configure_logging

console = Console()
logger = logging.getLogger(__name__)


@click.command()
def main() -> None:
    """Run the MySQL CRUD walkthrough against DATABASE_URL."""
    from mysql_crud_example.runtime.demo_runner import run_demo

    configure_logging()
    try:
        config = ModelDatabaseConfig.from_environment()
        users = asyncio.run(run_demo(config))
    except RuntimeHostError as e:
        logger.error(
            "CRUD walkthrough failed: %s",
            e,
            extra={
                "error_code": e.error_code.value,
                "correlation_id": str(e.correlation_id),
            },
        )
        console.print(f"[red]Error: {type(e).__name__}: {escape(str(e))}[/red]")
        raise SystemExit(1) from e

    _print_users(users)
    raise SystemExit(0)


def _print_users(users: list[ModelUser]) -> None:
    if not users:
        console.print("[yellow]No users remaining[/yellow]")
        return

    table = Table(title=f"Users ({len(users)})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Username", style="bold")
    table.add_column("Email", style="green")
    table.add_column("Updated At", style="dim")

    for user in users:
        table.add_row(
            str(user.id),
            user.username,
            user.email,
            user.updated_at.strftime("%Y-%m-%d %H:%M:%S"),
        )

    console.print(table)


__all__: list[str] = ["main"]
