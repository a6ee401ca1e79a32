"""
Page-level crawl operations: scrape, extract, search and screenshot.
"""

from typing import Any, Mapping

from crawlkit.resources.base import BaseResource


class CrawlResource(BaseResource):
    """Operations on arbitrary web pages."""

    async def scrape(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """
        Scrape a URL and return markdown, HTML, metadata and links.

        Args:
            params: ``{"url": ..., "options"?: {...}}``

        Returns:
            Scrape payload (``markdown``, ``html``, ``metadata``, ``links``,
            ``creditsUsed``, ...)
        """
        return await self._post("/v1/crawl/scrape", params)

    async def extract(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """
        Extract structured data from a URL using an LLM and a JSON schema.

        Args:
            params: ``{"url": ..., "schema": {...}, "options"?: {...}}``

        Returns:
            Extract payload; the extracted object is under ``json``
        """
        return await self._post("/v1/crawl/extract", params)

    async def search(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Run a web search. ``params``: ``{"query": ..., "options"?: {...}}``."""
        return await self._post("/v1/crawl/search", params)

    async def screenshot(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Take a full-page screenshot and return its public URL."""
        return await self._post("/v1/crawl/screenshot", params)
