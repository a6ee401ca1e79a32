"""
LinkedIn operations.
"""

from typing import Any, Mapping

from crawlkit.resources.base import BaseResource


class LinkedInResource(BaseResource):
    """LinkedIn company and person profiles."""

    async def company(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape a company page. ``params``: ``{"url": ..., "options"?: {...}}``."""
        return await self._post("/v1/crawl/linkedin/company", params)

    async def person(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Scrape one or more person profiles. ``params["url"]`` may be a list."""
        return await self._post("/v1/crawl/linkedin/person", params)
