"""
CrawlKit - Python client for the CrawlKit web-scraping API.

This package provides an async client for scraping pages, extracting
structured data, searching, taking screenshots and scraping LinkedIn,
Instagram, TikTok and app store listings. Every operation returns the
API's payload or raises a classified APIError.
"""

__version__ = "0.1.0"
__author__ = "CrawlKit Team"

from crawlkit.config import Settings, load_config
from crawlkit.utils.logging import setup_logging, get_logger
from crawlkit.core.exceptions import (
    CrawlKitError,
    ConfigurationError,
    ErrorKind,
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    ValidationError,
    RateLimitError,
    RequestTimeoutError,
    NotFoundError,
    NetworkError,
    ResponseParseError,
    UnknownError,
    create_error_from_response,
    is_retryable,
)
from crawlkit.api import HttpxTransport, RequestExecutor, ResourceConfig
from crawlkit.client import CrawlKit

__all__ = [
    "CrawlKit",
    "Settings",
    "load_config",
    "setup_logging",
    "get_logger",
    "HttpxTransport",
    "RequestExecutor",
    "ResourceConfig",
    "CrawlKitError",
    "ConfigurationError",
    "ErrorKind",
    "APIError",
    "AuthenticationError",
    "InsufficientCreditsError",
    "ValidationError",
    "RateLimitError",
    "RequestTimeoutError",
    "NotFoundError",
    "NetworkError",
    "ResponseParseError",
    "UnknownError",
    "create_error_from_response",
    "is_retryable",
]
