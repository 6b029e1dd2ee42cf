"""User management CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from src.bookstore.core.services.user.credential_service import CredentialService
from src.bookstore.entities.core.user import UserRepository

from .utils import console, get_database_service

users_app = typer.Typer(help="User management commands")


@users_app.command("create")
def create_user(
    username: str = typer.Argument(..., help="Login name"),
    email: str = typer.Option(..., help="Email address, used as the token subject"),
    password: str = typer.Option(
        ..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password"
    ),
    role: list[str] = typer.Option([], "--role", "-r", help="Role to grant, repeatable"),
) -> None:
    """
    Create a user who can log in through POST /users.

    Missing roles are created on the way.
    """
    database_service = get_database_service()
    try:
        with database_service.session_scope() as session:
            CredentialService(session).register(
                username=username, email=email, password=password, roles=role
            )
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from None
    finally:
        database_service.dispose()

    console.print(f"[green]✅ Created user {username}[/green]")


@users_app.command("list")
def list_users() -> None:
    """
    List users with their roles.
    """
    console.print(Panel.fit("[bold cyan]Users[/bold cyan]", border_style="cyan"))

    database_service = get_database_service()
    try:
        with database_service.session_scope() as session:
            rows = UserRepository(session).list_all()
            if not rows:
                console.print("[yellow]No users found[/yellow]")
                return

            table = Table(show_header=True, header_style="bold magenta")
            table.add_column("Id", style="dim")
            table.add_column("Username", style="cyan")
            table.add_column("Email", style="green")
            table.add_column("Roles", style="yellow")
            for row in rows:
                table.add_row(
                    str(row.id),
                    row.username,
                    row.email,
                    ", ".join(sorted(r.name for r in row.roles)),
                )
    finally:
        database_service.dispose()

    console.print(table)
    console.print(f"\n[dim]Showing {len(rows)} users[/dim]")
