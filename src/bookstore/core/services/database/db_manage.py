"""Schema creation and seed data."""

from loguru import logger
from sqlmodel import SQLModel

from src.bookstore.core.services.database.db_session import DbSessionService
from src.bookstore.core.services.user.credential_service import CredentialService
from src.bookstore.runtime.config.config_data import SeedConfig


class DbManageService:
    def __init__(self, database_service: DbSessionService):
        self._database_service = database_service

    def create_all(self) -> None:
        """Create all database tables."""
        import src.bookstore.entities  # noqa: F401  registers every table

        SQLModel.metadata.create_all(self._database_service.engine)
        logger.info("Database initialized with tables.")

    def seed(self, seed: SeedConfig) -> int:
        """Create configured roles and users that do not exist yet.

        Returns:
            Number of users created
        """
        created = 0
        with self._database_service.session_scope() as session:
            credentials = CredentialService(session)
            for role in seed.roles:
                credentials.ensure_role(role)
            session.commit()

            for user in seed.users:
                if credentials.find_by_name(user.username) is not None:
                    continue
                credentials.register(
                    username=user.username,
                    email=user.email,
                    password=user.password.get_secret_value(),
                    roles=user.roles,
                )
                created += 1

        if created:
            logger.info("Seeded {} user(s)", created)
        return created
