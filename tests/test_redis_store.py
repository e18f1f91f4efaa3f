"""Tests for the Redis slug store with a mocked client."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from slugcast.database.models import UrlRecord, PutResult
from slugcast.database.redis_store import RedisSlugStore
from slugcast.errors import StoreError


@pytest.fixture
def client():
    """Mocked redis.asyncio client."""
    return AsyncMock()


@pytest.fixture
def redis_store(client, logger):
    """Store over the mocked client."""
    return RedisSlugStore(prefix="test", client=client, logger=logger)


class TestKeys:
    """Test the key schema."""

    def test_slug_key(self, redis_store):
        """Slug keys are namespaced by prefix."""
        assert redis_store.slug_key("abcd1234") == "test:slug:abcd1234"


@pytest.mark.asyncio
class TestRedisSlugStore:
    """Test store operations against the mocked client."""

    async def test_put_created(self, redis_store, client):
        """SET NX succeeding means the slug was free."""
        client.set.return_value = True

        result = await redis_store.put("abcd1234", "https://example.com/a")

        assert result == PutResult.CREATED
        client.set.assert_awaited_once_with("test:slug:abcd1234", "https://example.com/a", nx=True)

    async def test_put_already_exists(self, redis_store, client):
        """SET NX returning None means the slug is taken."""
        client.set.return_value = None

        assert await redis_store.put("abcd1234", "https://example.com/a") == PutResult.ALREADY_EXISTS

    async def test_get_found(self, redis_store, client):
        """A stored value becomes a UrlRecord."""
        client.get.return_value = "https://example.com/a"

        record = await redis_store.get("abcd1234")

        assert record == UrlRecord(slug="abcd1234", url="https://example.com/a")
        client.get.assert_awaited_once_with("test:slug:abcd1234")

    async def test_get_missing(self, redis_store, client):
        """A missing key means None."""
        client.get.return_value = None

        assert await redis_store.get("abcd1234") is None

    async def test_connection_error_is_store_error(self, redis_store, client):
        """Redis failures surface as StoreError."""
        client.get.side_effect = RedisConnectionError("refused")

        with pytest.raises(StoreError, match="refused"):
            await redis_store.get("abcd1234")

    async def test_health_check(self, redis_store, client):
        """PING answering is healthy."""
        client.ping.return_value = True

        assert await redis_store.health_check() is True

    async def test_health_check_failure(self, redis_store, client):
        """A failing PING is unhealthy, not raised."""
        client.ping.side_effect = RedisConnectionError("refused")

        assert await redis_store.health_check() is False

    async def test_close(self, redis_store, client):
        """close() closes the client."""
        await redis_store.close()

        client.aclose.assert_awaited_once()
