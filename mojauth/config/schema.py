"""Configuration schema using Pydantic."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from mojauth.i18n.locale import normalize_locale


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    level: str = "INFO"
    file_enabled: bool = False
    file_path: str = "~/.mojauth/logs/mojauth.log"
    # Separate log that only receives internal (client-defect) auth errors
    internal_file_path: str | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


class DisplayConfig(BaseModel):
    """User-facing message configuration."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    locale: str = "en"

    @field_validator("locale")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_locale(value)


class Config(BaseSettings):
    """Root configuration for mojauth."""
    model_config = SettingsConfigDict(env_prefix="MOJAUTH_", env_nested_delimiter="__")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
