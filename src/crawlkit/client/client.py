"""
CrawlKit client.

Validates the API key, freezes the per-client configuration and wires the
resource groups that delegate to the request executor.
"""

from typing import Any, Mapping

from crawlkit.api.executor import ResourceConfig, validate_timeout_ms
from crawlkit.api.transport import HttpxTransport, Transport
from crawlkit.config.settings import (
    API_KEY_PREFIX,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
    Settings,
)
from crawlkit.core.exceptions import AuthenticationError
from crawlkit.resources import (
    AppStoreResource,
    CrawlResource,
    InstagramResource,
    LinkedInResource,
    TikTokResource,
)
from crawlkit.utils.logging import get_logger

logger = get_logger(__name__)


def validate_api_key(api_key: str | None) -> str:
    """
    Check an API key before any network activity.

    Raises:
        AuthenticationError: If the key is empty or lacks the ``ck_`` prefix
    """
    if not api_key:
        raise AuthenticationError("API key is required")

    if not api_key.startswith(API_KEY_PREFIX):
        raise AuthenticationError(
            f'Invalid API key format. API keys must start with "{API_KEY_PREFIX}"'
        )

    return api_key


class CrawlKit:
    """
    Client for the CrawlKit web-scraping API.

    Page-level operations are methods on the client; platform operations
    live on the ``linkedin``, ``instagram``, ``appstore`` and ``tiktok``
    groups. Every operation performs one request and returns the payload or
    raises an APIError.

    Example:
        >>> async with CrawlKit("ck_your_api_key") as crawlkit:
        ...     page = await crawlkit.scrape({"url": "https://example.com"})
        ...     profile = await crawlkit.tiktok.profile({"username": "nike"})
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: Transport | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Create a client.

        Args:
            api_key: API key, must start with ``ck_``
            base_url: API base URL
            timeout_ms: Deadline for every request in milliseconds
            transport: Custom transport (e.g. a stub in tests). When omitted
                       an HttpxTransport is created and closed by aclose().
            user_agent: User-Agent header value

        Raises:
            AuthenticationError: If the API key is missing or malformed
            ConfigurationError: If timeout_ms is not a positive integer
        """
        validate_api_key(api_key)
        validate_timeout_ms(timeout_ms)

        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport()
            transport = self._owned_transport

        self._config = ResourceConfig(
            api_key=api_key,
            base_url=base_url,
            timeout_ms=timeout_ms,
            transport=transport,
            user_agent=user_agent,
        )

        self._crawl = CrawlResource(self._config)
        self.linkedin = LinkedInResource(self._config)
        self.instagram = InstagramResource(self._config)
        self.appstore = AppStoreResource(self._config)
        self.tiktok = TikTokResource(self._config)

        logger.debug(f"Client created for {base_url} (timeout {timeout_ms}ms)")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Transport | None = None,
    ) -> "CrawlKit":
        """
        Create a client from loaded settings.

        The API key comes from ``settings.client.api_key`` or, when unset,
        from the environment variable named by ``api_key_env_var``.
        """
        client_settings = settings.client
        return cls(
            client_settings.resolve_api_key() or "",
            base_url=client_settings.base_url,
            timeout_ms=client_settings.timeout_ms,
            transport=transport,
            user_agent=client_settings.user_agent,
        )

    @property
    def config(self) -> ResourceConfig:
        """Return the client configuration (read-only)."""
        return self._config

    async def scrape(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape a URL. Costs 1 credit."""
        return await self._crawl.scrape(params)

    async def extract(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Extract structured data from a URL with a JSON schema. Costs 5 credits."""
        return await self._crawl.extract(params)

    async def search(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Perform a web search. Costs 1 credit per page of about 10 results."""
        return await self._crawl.search(params)

    async def screenshot(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Take a full-page screenshot of a URL. Costs 1 credit."""
        return await self._crawl.screenshot(params)

    async def aclose(self) -> None:
        """Release the HTTP connection pool if this client created it."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> "CrawlKit":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"CrawlKit(base_url={self._config.base_url!r}, timeout_ms={self._config.timeout_ms!r})"
