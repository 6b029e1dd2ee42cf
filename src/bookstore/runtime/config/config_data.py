"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, SecretStr, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class JWTClaimsConfig(BaseModel):
    """JWT claims mapping configuration."""

    user_id: str = Field(
        default="nameid", description="Claim name for the user's internal identifier"
    )
    roles: str = Field(default="roles", description="Claim name for user roles")


class JWTConfig(BaseModel):
    """Token issuance and validation configuration."""

    signing_key: SecretStr | None = Field(
        default=None, description="Symmetric key used to sign and verify tokens"
    )
    issuer: str = Field(
        default="bookstore-api",
        description="Issuer name, also used as the token audience",
    )
    algorithm: str = Field(default="HS256", description="Signing algorithm")
    allowed_algorithms: list[str] = Field(
        default_factory=lambda: ["HS256"],
        description="JWT algorithms allowed for token validation",
    )
    expires_minutes: int = Field(
        default=5, ge=1, description="Absolute token lifetime in minutes"
    )
    clock_skew: int = Field(default=60, description="Clock skew tolerance in seconds")
    claims: JWTClaimsConfig = Field(
        default_factory=JWTClaimsConfig, description="JWT claims mapping configuration"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./bookstore.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def resolve_password(self) -> str | None:
        """Read the database password from the configured file or environment variable."""
        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if not password:
                raise ValueError(
                    f"Environment variable {self.password_env_var} not set"
                )
            return password
        return None

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string, injecting the password if needed."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if self.is_sqlite or base_url.password:
            return self.url

        password = self.resolve_password()
        if not password:
            return self.url

        # render_as_string keeps the password; str() would mask it
        return base_url.set(password=password).render_as_string(hide_password=False)


class SecurityConfig(BaseModel):
    """Security configuration for authentication and authorization."""

    admin_role: str = Field(
        default="Administrator", description="Role required for author writes"
    )
    bcrypt_rounds: int = Field(
        default=12, ge=4, le=31, description="bcrypt cost factor for password hashes"
    )


class SeedUserConfig(BaseModel):
    """A user account created when the database is initialised."""

    username: str
    email: str
    password: SecretStr
    roles: list[str] = Field(default_factory=list)


class SeedConfig(BaseModel):
    """Roles and users created idempotently by init_db."""

    roles: list[str] = Field(default_factory=lambda: ["Administrator", "Customer"])
    users: list[SeedUserConfig] = Field(default_factory=list)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="Token configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
    seed: SeedConfig = Field(
        default_factory=SeedConfig, description="Initial roles and users"
    )

    def warn_on_insecure_defaults(self) -> None:
        """Emit warnings for settings that should never reach production."""
        if self.app.environment != "production":
            return
        if self.database.is_sqlite:
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )
        if "*" in self.app.cors.origins:
            logger.warning("CORS allows any origin in production")
