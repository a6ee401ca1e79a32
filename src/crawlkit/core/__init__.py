"""
Core module for the CrawlKit client.

Contains the error taxonomy and the classifier that maps failed API
responses onto it.
"""

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
    NETWORK_ERROR_CODES,
    RETRYABLE_KINDS,
    create_error_from_response,
    is_retryable,
)

__all__ = [
    # Base
    "CrawlKitError",
    "ConfigurationError",
    # API
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
    # Classification
    "NETWORK_ERROR_CODES",
    "RETRYABLE_KINDS",
    "create_error_from_response",
    "is_retryable",
]
