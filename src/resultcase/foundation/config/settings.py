"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.codec.default
    'orjson'

    # Or with environment variables:
    # RESULTCASE_LOG_LEVEL=DEBUG
    # RESULTCASE_CODEC_DEFAULT=msgpack
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CodecSettings(BaseSettings):
    """Wire codec defaults."""
    
    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_CODEC_",
        extra="ignore",
    )
    
    default: Literal["orjson", "msgpack"] = Field(default="orjson", description="Codec used when none is named")


class ResultcaseSettings(BaseSettings):
    """Root settings for resultcase.
    
    Loads configuration from environment variables with RESULTCASE_ prefix.
    Supports nested configuration and .env files.
    
    Example environment variables:
        RESULTCASE_DEBUG=true
        RESULTCASE_LOG_FORMAT=json
        RESULTCASE_CODEC_DEFAULT=msgpack
    """
    
    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    debug: bool = Field(default=False, description="Force DEBUG logging")
    
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)
    
    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached)."""
    return ResultcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).
    
    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
