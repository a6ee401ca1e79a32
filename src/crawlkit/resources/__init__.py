"""
Resource groups exposed by the CrawlKit client.
"""

from crawlkit.resources.base import BaseResource
from crawlkit.resources.crawl import CrawlResource
from crawlkit.resources.linkedin import LinkedInResource
from crawlkit.resources.instagram import InstagramResource
from crawlkit.resources.appstore import AppStoreResource
from crawlkit.resources.tiktok import TikTokResource

__all__ = [
    "BaseResource",
    "CrawlResource",
    "LinkedInResource",
    "InstagramResource",
    "AppStoreResource",
    "TikTokResource",
]
