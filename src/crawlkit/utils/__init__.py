"""
Utilities module for the CrawlKit client.

Provides logging setup and in-memory request metrics.
"""

from crawlkit.utils.logging import setup_logging, get_logger, get_logger_with_context
from crawlkit.utils.metrics import (
    Metrics,
    TimingStats,
    increment_requests,
    increment_errors,
    observe_request_latency,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "get_logger_with_context",
    # Metrics
    "Metrics",
    "TimingStats",
    "increment_requests",
    "increment_errors",
    "observe_request_latency",
]
