"""
Request executor shared by every API operation.

One call to RequestExecutor.execute() performs exactly one HTTP round trip
and either returns the unwrapped ``data`` payload or raises one APIError.
The executor keeps no state between calls, so a single instance can serve
any number of concurrent requests.
"""

import asyncio
import json
import time
from dataclasses import dataclass
from typing import Any, Literal, Mapping

import httpx

from crawlkit.api.envelope import unwrap_envelope
from crawlkit.api.transport import Transport
from crawlkit.config.settings import DEFAULT_USER_AGENT
from crawlkit.core.exceptions import (
    APIError,
    ConfigurationError,
    RequestTimeoutError,
    UnknownError,
)
from crawlkit.utils.logging import get_logger_with_context
from crawlkit.utils.metrics import (
    increment_errors,
    increment_requests,
    observe_request_latency,
)

HttpMethod = Literal["GET", "POST"]

QueryValue = str | int | float | bool | None


def validate_timeout_ms(timeout_ms: int) -> int:
    """
    Check that a timeout is a positive integer number of milliseconds.

    Raises:
        ConfigurationError: If the value is not a positive int
    """
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
        raise ConfigurationError(
            "timeout_ms must be a positive integer",
            {"timeout_ms": timeout_ms},
        )
    return timeout_ms


@dataclass(frozen=True)
class ResourceConfig:
    """
    Immutable per-client configuration shared by all resource groups.

    Attributes:
        api_key: Validated API key
        base_url: Prefix prepended verbatim to endpoint paths
        timeout_ms: Deadline for each call in milliseconds
        transport: Coroutine function performing the HTTP call
        user_agent: User-Agent header value
    """

    api_key: str
    base_url: str
    timeout_ms: int
    transport: Transport
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        validate_timeout_ms(self.timeout_ms)

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return (
            f"ResourceConfig(base_url={self.base_url!r}, "
            f"timeout_ms={self.timeout_ms!r}, user_agent={self.user_agent!r})"
        )


def encode_query_params(
    params: Mapping[str, QueryValue] | None,
) -> list[tuple[str, str]]:
    """
    Convert query parameters to encodable pairs.

    Entries whose value is None are dropped entirely. Booleans are written
    as ``true``/``false``.
    """
    if not params:
        return []

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            pairs.append((key, "true" if value else "false"))
        else:
            pairs.append((key, str(value)))
    return pairs


class RequestExecutor:
    """
    Issue API calls with a deadline and classify their outcome.

    Example:
        >>> executor = RequestExecutor(config)
        >>> data = await executor.execute("POST", "/v1/crawl/scrape", {"url": "https://example.com"})
    """

    def __init__(self, config: ResourceConfig) -> None:
        self.config = config

    def build_request(
        self,
        method: HttpMethod,
        endpoint_path: str,
        body: Mapping[str, Any] | None = None,
        query_params: Mapping[str, QueryValue] | None = None,
    ) -> httpx.Request:
        """
        Build the HTTP request for one call.

        Args:
            method: "GET" or "POST"
            endpoint_path: Path appended verbatim to the base URL
            body: JSON body for POST ({} when None)
            query_params: Query string entries for GET

        Returns:
            Request ready to hand to the transport
        """
        url = f"{self.config.base_url}{endpoint_path}"
        headers = {
            "Authorization": f"ApiKey {self.config.api_key}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

        if method == "GET":
            pairs = encode_query_params(query_params)
            return httpx.Request("GET", url, headers=headers, params=pairs or None)

        headers["Content-Type"] = "application/json"
        content = json.dumps(
            body if body is not None else {},
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return httpx.Request("POST", url, headers=headers, content=content.encode("utf-8"))

    async def execute(
        self,
        method: str,
        endpoint_path: str,
        body: Mapping[str, Any] | None = None,
        query_params: Mapping[str, QueryValue] | None = None,
    ) -> Any:
        """
        Perform one API call.

        Args:
            method: "GET" or "POST" (case-insensitive)
            endpoint_path: Path appended verbatim to the base URL
            body: JSON body for POST
            query_params: Query string entries for GET; None values are omitted

        Returns:
            The ``data`` member of the success envelope, unchanged

        Raises:
            ValueError: If method is neither GET nor POST
            APIError: On any failure (timeout, transport fault, unparsable
                      body, or an error reported by the API)
        """
        normalized = method.upper()
        if normalized not in ("GET", "POST"):
            raise ValueError(f"Unsupported HTTP method: {method!r}")

        request = self.build_request(normalized, endpoint_path, body, query_params)
        log = get_logger_with_context(__name__, method=normalized, endpoint=endpoint_path)

        log.debug("Sending request")
        increment_requests()
        start = time.perf_counter()

        try:
            data = await self._send(request)
        except APIError as e:
            increment_errors(e.kind.value)
            log.warning(f"Request failed: {e}")
            raise
        finally:
            observe_request_latency((time.perf_counter() - start) * 1000)

        log.debug("Request succeeded")
        return data

    async def _call_transport(self, request: httpx.Request) -> httpx.Response:
        """Await the transport, classifying its own failures as UNKNOWN."""
        try:
            return await self.config.transport(request)
        except APIError:
            raise
        except Exception as e:
            # Includes a TimeoutError raised by the transport itself
            raise UnknownError(str(e) or "An unknown error occurred") from e

    async def _send(self, request: httpx.Request) -> Any:
        """Race the transport against the deadline, then unwrap the envelope."""
        timeout_ms = self.config.timeout_ms

        try:
            response = await asyncio.wait_for(
                self._call_transport(request),
                timeout=timeout_ms / 1000,
            )
        except asyncio.TimeoutError as e:
            # Only the deadline can get here; the pending send has been cancelled
            raise RequestTimeoutError(f"Request timed out after {timeout_ms}ms") from e

        return unwrap_envelope(response)
