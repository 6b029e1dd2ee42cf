"""Command-line interface for the Bookstore API.

Manages the database and users, and starts the HTTP server.
"""

import typer

from .db_commands import db_app
from .user_commands import users_app
from .utils import console

app = typer.Typer(
    name="bookstore",
    help="Bookstore API CLI - Manage the database, users and server",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind to (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port to bind to (defaults to app.port)"),
) -> None:
    """
    Start the HTTP server.
    """
    import uvicorn

    from src.bookstore.api.http.app import app as api_app
    from src.bookstore.runtime.context import get_config

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(f"[blue]Server will be available at:[/blue] http://{bind_host}:{bind_port}")
    uvicorn.run(api_app, host=bind_host, port=bind_port, access_log=False)


def main() -> None:
    app()


__all__ = ["app", "main"]
