"""
Instagram operations.
"""

from typing import Any, Mapping

from crawlkit.resources.base import BaseResource


class InstagramResource(BaseResource):
    """Instagram profiles and posts."""

    async def profile(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape a profile. ``params``: ``{"username": ..., "options"?: {...}}``."""
        return await self._post("/v1/crawl/instagram/profile", params)

    async def content(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape a post or reel. ``params``: ``{"shortcode": ..., "options"?: {...}}``."""
        return await self._post("/v1/crawl/instagram/content", params)
