"""
Evernote Server Configuration
Pydantic Settings for environment-based configuration
Source: https://docs.pydantic.dev/latest/concepts/pydantic_settings/
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.evernote.com"


class EvernoteSettings(BaseSettings):
    """
    Settings loaded from environment variables (and an optional .env file).

    EVERNOTE_API_KEY may be empty; the dispatcher rejects every tool call
    in that case rather than failing at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Evernote API
    # =========================================================================
    EVERNOTE_API_KEY: str = Field(default="", description="Evernote API bearer token")
    EVERNOTE_API_URL: str = Field(
        default=DEFAULT_API_URL, description="Evernote API base URL"
    )
    EVERNOTE_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, description="HTTP transport timeout (seconds)"
    )

    # =========================================================================
    # MCP Server
    # =========================================================================
    MCP_SERVER_NAME: str = Field(default="evernote-server", description="MCP server name")
    MCP_SERVER_VERSION: str = Field(default="0.1.0", description="MCP server version")

    # =========================================================================
    # Logging
    # =========================================================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")
    JSON_LOGS: bool = Field(default=False, description="Serialize logs as JSON")

    @field_validator("EVERNOTE_API_KEY", mode="before")
    @classmethod
    def strip_api_key(cls, v: object) -> object:
        """Treat whitespace-only keys as missing."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("EVERNOTE_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.EVERNOTE_API_KEY)


@lru_cache
def get_evernote_settings() -> EvernoteSettings:
    """
    Get cached settings instance.

    Settings are read once per process; call ``get_evernote_settings.cache_clear()``
    to force a reload.
    """
    return EvernoteSettings()
