"""Tests for the Redis lookup cache."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from slugcast.database import cache as cache_module
from slugcast.database.cache import RedisCache


@pytest.fixture
def client():
    """Mocked redis.asyncio client."""
    return AsyncMock()


@pytest.fixture
def cache(client, logger):
    """Enabled cache over the mocked client."""
    cache = RedisCache(redis_url="redis://localhost:6379/1", ttl_seconds=60, prefix="test", logger=logger)
    cache.client = client
    return cache


@pytest.mark.asyncio
class TestRedisCache:
    """Test cache behaviour."""

    async def test_disabled_without_url(self, logger):
        """Without a URL the cache is a no-op."""
        cache = RedisCache(logger=logger)

        await cache.connect()

        assert cache.enabled is False
        assert await cache.get("key") is None
        assert await cache.set("key", "value") is False
        assert await cache.ping() is True

    async def test_cache_key(self, cache):
        """Cache keys are namespaced apart from store keys."""
        assert cache.get_cache_key("abcd1234") == "test:cache:abcd1234"

    async def test_get(self, cache, client):
        """get() returns the cached value."""
        client.get.return_value = "https://example.com/a"

        assert await cache.get("test:cache:abcd1234") == "https://example.com/a"

    async def test_set_uses_ttl(self, cache, client):
        """set() writes with the default TTL."""
        assert await cache.set("k", "v") is True

        client.setex.assert_awaited_once_with("k", 60, "v")

    async def test_set_ttl_override(self, cache, client):
        """A per-call TTL overrides the default."""
        await cache.set("k", "v", ttl=5)

        client.setex.assert_awaited_once_with("k", 5, "v")

    async def test_errors_are_misses(self, cache, client):
        """Redis errors are logged and treated as a miss."""
        client.get.side_effect = RedisConnectionError("down")
        client.setex.side_effect = RedisConnectionError("down")
        client.ping.side_effect = RedisConnectionError("down")

        assert await cache.get("k") is None
        assert await cache.set("k", "v") is False
        assert await cache.ping() is False

    async def test_connect_failure_disables_cache(self, monkeypatch, logger):
        """An unreachable Redis disables the cache instead of failing startup."""
        client = AsyncMock()
        client.ping.side_effect = RedisConnectionError("refused")
        monkeypatch.setattr(cache_module.redis, "from_url", lambda *args, **kwargs: client)
        cache = RedisCache(redis_url="redis://localhost:6379/1", logger=logger)

        await cache.connect()

        assert cache.enabled is False
        assert await cache.get("k") is None

    async def test_close(self, cache, client):
        """close() closes the client."""
        await cache.close()

        client.aclose.assert_awaited_once()
