"""
TikTok operations.
"""

from typing import Any, Mapping

from crawlkit.resources.base import BaseResource


class TikTokResource(BaseResource):
    """TikTok profiles, single posts and paginated post listings."""

    async def profile(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape a profile. ``params``: ``{"username": ..., "options"?: {...}}``."""
        return await self._post("/v1/crawl/tiktok/profile", params)

    async def content(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape one post. ``params``: ``{"url": ..., "options"?: {...}}``."""
        return await self._post("/v1/crawl/tiktok/post", params)

    async def posts(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """
        List a user's posts.

        Pass ``cursor`` and ``secUid`` from the previous response's
        ``pagination`` to fetch the next page.
        """
        return await self._post("/v1/crawl/tiktok/posts", params)
