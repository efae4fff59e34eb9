"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Values are read from environment variables (case-insensitive) and fall
back to a local .env file, then to the defaults declared below.

PATTERN: Settings Singleton
===========================
A single Settings instance is cached with @lru_cache so that the .env
file is read once and every module sees the same configuration.

Usage:
    from library_graph.config import get_settings

    settings = get_settings()
    print(settings.record_store)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field(default=...) is used for every setting so the app starts with
    the in-memory record store and no external services.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Library Graph",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=4000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Record Store Settings
    # -------------------------------------------------------------------------
    record_store: str = Field(
        default="memory",
        description="Backend for book/author records: memory or database"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./library.db",
        description="SQLAlchemy connection URL used by the database record store"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections (not used for SQLite)"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load (not used for SQLite)"
    )

    # -------------------------------------------------------------------------
    # GraphQL Settings
    # -------------------------------------------------------------------------
    graphql_ide_enabled: bool = Field(
        default=True,
        description="Serve the GraphiQL IDE on GET /graphql"
    )

    # -------------------------------------------------------------------------
    # CORS Settings
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
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def uses_database(self) -> bool:
        """Check if records are persisted through SQLAlchemy."""
        return self.record_store == "database"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("record_store")
    @classmethod
    def validate_record_store(cls, v: str) -> str:
        """Validate record_store names a known backend."""
        valid_stores = {"memory", "database"}
        if v.lower() not in valid_stores:
            raise ValueError(f"record_store must be one of {valid_stores}")
        return v.lower()

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

    The first call builds Settings (reading the environment and .env);
    later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
