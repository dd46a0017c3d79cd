"""Client configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hostelhub.errors import ConfigurationError


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    ``SUPABASE_URL`` and ``SUPABASE_ANON_KEY`` have no defaults: a client
    without them cannot reach its store, so construction fails instead.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "HostelHub"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # Supabase project
    supabase_url: str
    supabase_anon_key: str

    @field_validator("supabase_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        """Require an absolute http(s) endpoint and drop any trailing slash."""
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("SUPABASE_URL must be an http:// or https:// URL")
        return value.rstrip("/")

    @field_validator("supabase_anon_key")
    @classmethod
    def _check_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("SUPABASE_ANON_KEY must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process.

    Raises:
        ConfigurationError: If the Supabase URL or anon key is missing or invalid.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        missing = ", ".join(str(err["loc"][0]).upper() for err in exc.errors())
        raise ConfigurationError(f"Invalid or missing Supabase configuration: {missing}") from exc
