"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the trip store.
        database_echo: Log every SQL statement.
        rate_limit_enabled: Apply the default rate limit to every route.
        rate_limit_default: Default rate limit for all endpoints.
        default_page_limit: Page size used when a list request gives none.
        max_page_limit: Largest page size a client may ask for.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRIPS_", env_file=".env", env_file_encoding="utf-8"
    )

    project_name: str = "Trips API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./trips.db"
    database_echo: bool = False

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    default_page_limit: int = 100
    max_page_limit: int = 500


settings = Settings()
