"""
CLI module for the CrawlKit client.

Provides command-line interface using Typer:
- scrape, extract, search, screenshot: page-level operations
- linkedin, instagram, tiktok, appstore: platform operations
- config: Configuration management
"""

from crawlkit.cli.main import app

__all__ = ["app"]
