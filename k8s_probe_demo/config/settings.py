"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from k8s_probe_demo.domain import DEFAULT_SEED_CUSTOMER_NAMES


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime, storage and probe behavior.

    Environment variable names map directly to field names in uppercase.
    Example: `database_url` reads from `DATABASE_URL`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        database_url: SQLAlchemy async DSN for customer storage.
        database_initialize_schema: Create the customer table at startup when missing.
        seed_on_startup: Write seed customers once the application has started.
        seed_customer_names: Names written by the startup seeder.
        slow_delay_seconds: Blocking delay applied by the `/slow` endpoint.
        log_level: Root logger level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    database_url: str = Field(default="sqlite+aiosqlite:///./customers.db")
    database_initialize_schema: bool = Field(default=True)
    seed_on_startup: bool = Field(default=True)
    seed_customer_names: list[str] = Field(default_factory=lambda: list(DEFAULT_SEED_CUSTOMER_NAMES))
    slow_delay_seconds: float = Field(default=10.0, ge=0)
    log_level: str = Field(default="INFO")

    @field_validator("database_url")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("seed_customer_names")
    @classmethod
    def _validate_seed_names(cls, value: list[str]) -> list[str]:
        stripped_names = [name.strip() for name in value]
        if any(not name for name in stripped_names):
            raise ValueError("seed_customer_names must not contain blank names")
        return stripped_names

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        if normalized_level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized_level


class DatabaseUrlSettings(BaseSettings):
    """Minimal settings model used by migration tooling.

    Attributes:
        database_url: SQLAlchemy DSN for schema migrations.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    database_url: str = Field(default="sqlite+aiosqlite:///./customers.db")


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_database_url() -> str:
    """Load and validate only the database URL setting.

    Returns:
        str: Non-empty database URL for migration and db tooling.

    Raises:
        SettingsLoadError: Raised when database URL cannot be loaded.
    """

    try:
        database_settings = DatabaseUrlSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Database URL configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error

    database_url = str(database_settings.database_url).strip()
    if not database_url:
        raise SettingsLoadError("Database URL configuration validation failed. DATABASE_URL must not be blank.")
    return database_url
