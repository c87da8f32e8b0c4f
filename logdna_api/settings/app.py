"""Application settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from logdna_api.request.constants import DEFAULT_HOST, DEFAULT_TIMEOUT_SECONDS


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    service_key: str = Field(default="", validation_alias="LOGDNA_SERVICE_KEY")
    host: str = Field(default=DEFAULT_HOST, validation_alias="LOGDNA_HOST")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, validation_alias="LOGDNA_TIMEOUT_SECONDS"
    )


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
