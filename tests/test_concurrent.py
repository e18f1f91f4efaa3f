"""Tests that the server handles multiple concurrent connections correctly.

Requests share one store handle. These tests assert that simultaneous
submissions agree on slugs and that reads stay correct under load.
"""

import asyncio
import pytest


@pytest.mark.asyncio
class TestConcurrentConnections:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_health_requests(self, client):
        """Many concurrent GET /api/health requests all succeed."""
        concurrency = 50
        tasks = [client.get("/api/health") for _ in range(concurrency)]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code}"

    async def test_concurrent_shorten_requests(self, client):
        """Concurrent POST /api/shorten with different URLs all succeed with unique slugs."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [client.post("/api/shorten", json={"url": url}) for url in urls]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        slugs = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 201, f"Request {i}: status {r.status_code}"
            slugs.append(r.json()["slug"])

        assert len(set(slugs)) == concurrency, "Slugs must be unique"

    async def test_concurrent_same_url(self, client, store):
        """Concurrent submissions of one URL agree on a slug and create it once."""
        concurrency = 20
        url = "https://example.com/same"
        tasks = [client.post("/api/shorten", json={"url": url}) for _ in range(concurrency)]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")

        assert {r.json()["slug"] for r in responses} == {responses[0].json()["slug"]}
        assert sorted(r.status_code for r in responses) == [200] * (concurrency - 1) + [201]
        assert len(store) == 1

    async def test_concurrent_redirect_requests(self, client):
        """Many concurrent GET /{slug} requests all redirect to the right URL."""
        url = "https://example.com/redirect-target"
        create = await client.post("/api/shorten", json={"url": url})
        assert create.status_code == 201
        slug = create.json()["slug"]

        concurrency = 40
        tasks = [client.get(f"/{slug}", follow_redirects=False) for _ in range(concurrency)]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers["location"] == url
