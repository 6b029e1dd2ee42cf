"""Shared utilities for CLI commands."""

from rich.console import Console

from src.bookstore.core.services.database.db_manage import DbManageService
from src.bookstore.core.services.database.db_session import DbSessionService
from src.bookstore.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()


def get_database_service() -> DbSessionService:
    """Build a database service for the configured URL with all tables in place."""
    database_service = DbSessionService(get_config())
    DbManageService(database_service).create_all()
    return database_service
