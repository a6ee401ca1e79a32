"""
Pydantic settings models for the CrawlKit client.

All configuration is defined here with defaults that match the hosted API.
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from crawlkit import __version__

DEFAULT_BASE_URL = "https://api.example.sh"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_USER_AGENT = f"crawlkit-python/{__version__}"
API_KEY_PREFIX = "ck_"


class ClientSettings(BaseModel):
    """API client configuration."""

    api_key: str | None = Field(
        default=None,
        description="API key (must start with 'ck_'). None reads api_key_env_var.",
    )
    api_key_env_var: str = Field(
        default="CRAWLKIT_API_KEY",
        description="Environment variable name containing the API key",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Absolute URL prefix prepended to every endpoint path",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        ge=1,
        le=600000,
        description="Timeout for each API request in milliseconds",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an absolute http(s) URL, got: {v!r}")
        return v

    def resolve_api_key(self) -> str | None:
        """Return the configured key, falling back to the environment."""
        if self.api_key:
            return self.api_key
        return os.environ.get(self.api_key_env_var)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log timestamps",
    )
    file_path: Path | None = Field(
        default=None,
        description="Path to log file. None means console only.",
    )
    max_file_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum log file size before rotation",
    )
    backup_count: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Number of backup log files to keep",
    )
    log_to_console: bool = Field(
        default=True,
        description="Whether to output logs to console",
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def convert_file_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseModel):
    """
    Root configuration model.

    Settings are loaded from YAML with environment variable overrides.
    """

    client: ClientSettings = Field(
        default_factory=ClientSettings,
        description="API client settings",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
