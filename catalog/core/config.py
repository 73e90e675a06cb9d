"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_sql: Log every SQL statement (SQLAlchemy engine logger at INFO).
        rate_limit_enabled: Turn the per-client rate limit on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: Full SQLAlchemy URL. Takes precedence over postgres_*.
        create_schema_on_startup: Create missing tables when the app starts.
        seed_on_startup: Load demo catalog data when the app starts.
        default_page_size: Page size used when the client sends none.
        max_page_size: Upper bound accepted for the page size.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_sql: bool = False
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "catalog"

    create_schema_on_startup: bool = True
    seed_on_startup: bool = False

    default_page_size: int = 12
    max_page_size: int = 100

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL` (any SQLAlchemy URL, e.g. ``sqlite:///catalog.db``)
        2. DSN built from postgres_* values (Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
