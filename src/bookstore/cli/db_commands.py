"""Database management CLI commands."""

import typer
from rich.panel import Panel

from src.bookstore.core.services.database.db_manage import DbManageService
from src.bookstore.runtime.context import get_config

from .utils import console, get_database_service

db_app = typer.Typer(help="Database management commands")


@db_app.command("init")
def init_database(
    seed: bool = typer.Option(True, "--seed/--no-seed", help="Create the configured roles and users"),
) -> None:
    """
    Create all tables and seed the configured roles and users.

    Safe to run repeatedly: existing roles and users are left untouched.
    """
    console.print(
        Panel.fit("[bold blue]Initializing Database[/bold blue]", border_style="blue")
    )

    database_service = get_database_service()
    try:
        console.print("[green]✅ Tables created[/green]")
        if seed:
            created = DbManageService(database_service).seed(get_config().seed)
            console.print(f"[green]✅ Seeded {created} user(s)[/green]")
    finally:
        database_service.dispose()
