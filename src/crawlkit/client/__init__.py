"""
Client module for CrawlKit.
"""

from crawlkit.client.client import CrawlKit, validate_api_key

__all__ = ["CrawlKit", "validate_api_key"]
