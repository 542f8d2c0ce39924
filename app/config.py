"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Settings are read from environment variables (case-insensitive) and fall back
to a local .env file. Database connection parameters can be given either as a
single DATABASE_URL or as the individual POSTGRES_* parts:

    POSTGRES_HOST=localhost
    POSTGRES_PORT=5432
    POSTGRES_USER=books
    POSTGRES_PASSWORD=secret
    POSTGRES_DBNAME=books
    POSTGRES_SCHEMA=public

PATTERN: Settings Singleton
===========================
A single Settings instance is cached with @lru_cache, so the .env file is read
once and every caller shares the same configuration.

Usage:
    from app.config import get_settings

    settings = get_settings()
    print(settings.database_url_resolved)
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field(...) is used for required fields with descriptions.
    default=value is used for optional fields with defaults.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Books API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, request logging, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8080,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    # A full URL wins over the individual POSTGRES_* parts
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy database URL (overrides POSTGRES_* settings)"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_user: str = Field(default="postgres", description="PostgreSQL user")
    postgres_password: str = Field(default="postgres", description="PostgreSQL password")
    postgres_dbname: str = Field(default="books", description="PostgreSQL database name")
    postgres_schema: str = Field(
        default="public",
        description="Schema placed on the connection search_path"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load"
    )
    db_create_tables: bool = Field(
        default=True,
        description="Create missing tables at startup"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def database_url_resolved(self) -> str:
        """
        The SQLAlchemy URL the engine connects to.

        When DATABASE_URL is not set, the URL is assembled from the POSTGRES_*
        parts, with the configured schema set as the connection search_path.

        Returns:
            Database URL as a string
        """
        if self.database_url:
            return self.database_url

        url = URL.create(
            "postgresql+psycopg2",
            username=self.postgres_user,
            password=self.postgres_password,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_dbname,
            query={"options": f"-csearch_path={self.postgres_schema}"},
        )
        return url.render_as_string(hide_password=False)

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Args:
            v: The value to validate

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call creates the Settings instance (reading .env and the
    environment); later calls return the cached instance. Tests that need
    different settings construct Settings() directly and pass it to
    create_app().

    Returns:
        Cached Settings instance
    """
    return Settings()
