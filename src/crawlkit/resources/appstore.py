"""
App store operations for Google Play and the Apple App Store.
"""

from typing import Any, Mapping

from crawlkit.resources.base import BaseResource


class AppStoreResource(BaseResource):
    """
    App details and paginated reviews.

    Review endpoints take an optional ``cursor`` from the previous page's
    ``pagination`` block.
    """

    async def playstore_reviews(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._post("/v1/crawl/playstore/reviews", params)

    async def playstore_detail(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._post("/v1/crawl/playstore/detail", params)

    async def appstore_detail(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._post("/v1/crawl/appstore/detail", params)

    async def appstore_reviews(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._post("/v1/crawl/appstore/reviews", params)
