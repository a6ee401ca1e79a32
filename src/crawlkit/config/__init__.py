"""
Configuration module for the CrawlKit client.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from crawlkit.config.settings import (
    Settings,
    ClientSettings,
    LoggingSettings,
    API_KEY_PREFIX,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
)
from crawlkit.config.loader import (
    load_config,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "ClientSettings",
    "LoggingSettings",
    "API_KEY_PREFIX",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_USER_AGENT",
    "load_config",
    "get_default_config_path",
]
