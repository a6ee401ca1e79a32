"""
Request execution layer for the CrawlKit client.

Provides the request executor, the response envelope handling and the
pluggable HTTP transport.
"""

from crawlkit.api.envelope import ApiErrorDetail, ApiFailureEnvelope, unwrap_envelope
from crawlkit.api.executor import (
    RequestExecutor,
    ResourceConfig,
    encode_query_params,
    validate_timeout_ms,
)
from crawlkit.api.transport import HttpxTransport, Transport

__all__ = [
    # Executor
    "RequestExecutor",
    "ResourceConfig",
    "encode_query_params",
    "validate_timeout_ms",
    # Envelope
    "ApiErrorDetail",
    "ApiFailureEnvelope",
    "unwrap_envelope",
    # Transport
    "HttpxTransport",
    "Transport",
]
