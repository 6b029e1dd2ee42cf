from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.bookstore.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)

if TYPE_CHECKING:
    from loguru import Logger


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_generation_service: JwtGeneratorService
    jwt_verify_service: JwtVerificationService
    logger: "Logger"
