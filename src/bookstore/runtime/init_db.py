"""Database initialization script."""

from src.bookstore.core.services.database.db_manage import DbManageService
from src.bookstore.core.services.database.db_session import DbSessionService
from src.bookstore.runtime.context import get_config


def init_db(seed: bool = True) -> int:
    """Create all database tables and, unless disabled, the seed roles and users.

    Returns:
        Number of users created by seeding
    """
    config = get_config()
    database_service = DbSessionService(config)
    try:
        db_manage_service = DbManageService(database_service)
        db_manage_service.create_all()
        if not seed:
            return 0
        return db_manage_service.seed(config.seed)
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
