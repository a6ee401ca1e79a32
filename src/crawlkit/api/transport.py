"""
Pluggable HTTP transport.

A transport is any coroutine function taking an ``httpx.Request`` and
returning a response object with ``status_code`` and ``json()``. Tests
inject plain async functions returning ``httpx.Response``; production code
uses HttpxTransport.
"""

from typing import Awaitable, Callable

import httpx

from crawlkit.utils.logging import get_logger

logger = get_logger(__name__)

Transport = Callable[[httpx.Request], Awaitable[httpx.Response]]


class HttpxTransport:
    """
    Default transport backed by an ``httpx.AsyncClient``.

    The client's own timeout is disabled: the request executor owns the
    deadline and cancels the pending send when it expires.

    Example:
        >>> transport = HttpxTransport()
        >>> response = await transport(httpx.Request("GET", "https://api.example.sh/health"))
        >>> await transport.aclose()
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize the transport.

        Args:
            client: Existing client to send through. It is not closed by
                    aclose(); a client created here is.
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=None)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        return await self._client.send(request)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("HTTP client closed")
