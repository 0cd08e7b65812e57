"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_HOST = "::"
IPV4_ANY_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """Runtime configuration for the greeting service.

    Values come only from keyword arguments: the listener address is a fixed
    literal of the service and is not read from the environment or ``.env``.
    """

    model_config = SettingsConfigDict(frozen=True)

    host: str = Field(
        default=DEFAULT_HOST,
        description="Interface the listener binds to; \"::\" covers IPv6 and IPv4 on every interface",
        min_length=1,
    )
    port: int = Field(
        default=DEFAULT_PORT,
        description="TCP port of the listener; 0 asks the OS for an ephemeral port",
        ge=0,
        le=65535,
    )
    log_level: str = Field(
        default="warning",
        description="Log level handed to uvicorn for its own loggers",
    )
    access_log: bool = Field(
        default=False,
        description="Whether uvicorn writes one line per request",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force rebuilding the default settings."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "IPV4_ANY_HOST", "Settings", "get_settings", "reset_settings_cache"]
