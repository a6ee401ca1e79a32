"""
Tests for platform resource groups.

Each operation should POST its params unchanged to a fixed endpoint and
return the envelope data.
"""

import json

import pytest

from crawlkit import CrawlKit
from tests.conftest import TEST_API_KEY, StubTransport, success_body


def posted_body(transport: StubTransport) -> dict:
    return json.loads(transport.last_request.content)


class TestLinkedInResource:
    """Tests for LinkedIn operations."""

    @pytest.mark.asyncio
    async def test_company(self, client, ok_transport):
        params = {"url": "https://www.linkedin.com/company/openai/", "options": {"includeJobs": True}}

        await client.linkedin.company(params)

        assert ok_transport.last_request.url.path == "/v1/crawl/linkedin/company"
        assert posted_body(ok_transport) == params

    @pytest.mark.asyncio
    async def test_person_batch(self, client, ok_transport):
        """A list of URLs should be sent as-is."""
        params = {"url": ["https://www.linkedin.com/in/a", "https://www.linkedin.com/in/b"]}

        await client.linkedin.person(params)

        assert ok_transport.last_request.url.path == "/v1/crawl/linkedin/person"
        assert posted_body(ok_transport) == params


class TestInstagramResource:
    """Tests for Instagram operations."""

    @pytest.mark.asyncio
    async def test_profile(self, client, ok_transport):
        await client.instagram.profile({"username": "nike"})

        assert ok_transport.last_request.url.path == "/v1/crawl/instagram/profile"

    @pytest.mark.asyncio
    async def test_content(self, client, ok_transport):
        await client.instagram.content({"shortcode": "DQwH"})

        assert ok_transport.last_request.url.path == "/v1/crawl/instagram/content"
        assert posted_body(ok_transport) == {"shortcode": "DQwH"}


class TestTikTokResource:
    """Tests for TikTok operations."""

    @pytest.mark.asyncio
    async def test_profile(self, client, ok_transport):
        await client.tiktok.profile({"username": "@nike"})

        assert ok_transport.last_request.url.path == "/v1/crawl/tiktok/profile"

    @pytest.mark.asyncio
    async def test_content(self, client, ok_transport):
        """Single-post scraping should use the post endpoint."""
        await client.tiktok.content({"url": "https://www.tiktok.com/@nike/video/123"})

        assert ok_transport.last_request.url.path == "/v1/crawl/tiktok/post"

    @pytest.mark.asyncio
    async def test_posts_pagination(self, client, ok_transport):
        """Pagination fields should be forwarded unchanged."""
        params = {"username": "nike", "cursor": 1700000000000, "secUid": "MS4wLjABAAAA"}

        await client.tiktok.posts(params)

        assert ok_transport.last_request.url.path == "/v1/crawl/tiktok/posts"
        assert posted_body(ok_transport) == params

    @pytest.mark.asyncio
    async def test_posts_returns_data(self):
        """Returned data should include pagination as sent by the API."""
        data = {"posts": [{"id": "1"}], "pagination": {"hasMore": True, "cursor": 42, "secUid": "X"}}
        transport = StubTransport(200, success_body(data))
        client = CrawlKit(TEST_API_KEY, transport=transport)

        result = await client.tiktok.posts({"username": "nike"})

        assert result == data


class TestAppStoreResource:
    """Tests for app store operations."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("playstore_reviews", "/v1/crawl/playstore/reviews"),
            ("playstore_detail", "/v1/crawl/playstore/detail"),
            ("appstore_detail", "/v1/crawl/appstore/detail"),
            ("appstore_reviews", "/v1/crawl/appstore/reviews"),
        ],
    )
    async def test_endpoints(self, client, ok_transport, method, path):
        params = {"appId": "com.example.app", "cursor": None}

        await getattr(client.appstore, method)(params)

        assert ok_transport.last_request.url.path == path
        assert ok_transport.last_request.method == "POST"
        assert posted_body(ok_transport) == params
