"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Precedence: init kwargs > environment > .env > config.json
    - A missing config.json is not an error (all fields have defaults)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - config.json keeps the deployment file shape
      ({"env", "port", "logger": {"level", "format"}}); environment variables
      override it, nested fields via "__" (LOGGER__LEVEL=debug)
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class LoggerSettings(BaseModel):
    """Log level and output format."""
    level: str = "info"
    format: Literal["json", "text"] = "json"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class Settings(BaseSettings):
    """Application settings from environment variables and config.json."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        json_file="config.json",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = "development"
    host: str = "0.0.0.0"
    port: int = 8080

    logger: LoggerSettings = LoggerSettings()

    # API
    cors_origins: list[str] = ["*"]

    # Server timeouts (uvicorn)
    idle_timeout_seconds: int = 60
    shutdown_timeout_seconds: int = 30

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
