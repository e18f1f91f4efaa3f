"""Redis cache layer for slug lookups."""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError


class RedisCache:
    """Read-through cache for slug -> URL lookups.

    Mappings are immutable, so a cached entry can never be stale; the TTL
    only bounds memory use. Redis errors are logged and treated as a miss.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        prefix: str = "slugcast",
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis cache.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            ttl_seconds: Default TTL for cached items
            prefix: Namespace prepended to every cache key
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = redis_url is not None
        self.client: Optional[redis.Redis] = None

        if self.enabled:
            self.logger.info(f"Redis cache enabled with TTL={ttl_seconds}s")

    async def connect(self) -> None:
        """Connect to Redis, disabling the cache if it is unreachable."""
        if not self.enabled:
            return

        try:
            self.client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
            await self.client.ping()
            self.logger.info("Connected to Redis cache")
        except (RedisError, OSError) as e:
            self.logger.error(f"Failed to connect to Redis cache: {e}")
            self.enabled = False

    async def get(self, key: str) -> Optional[str]:
        """Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None
        """
        if not self.enabled or not self.client:
            return None

        try:
            return await self.client.get(key)
        except RedisError as e:
            self.logger.error(f"Cache get error: {e}")
            return None

    async def set(
        self,
        key: str,
        value: str,
        ttl: Optional[int] = None,
    ) -> bool:
        """Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Optional TTL override (seconds)

        Returns:
            True if successful
        """
        if not self.enabled or not self.client:
            return False

        try:
            await self.client.setex(key, ttl or self.ttl_seconds, value)
            return True
        except RedisError as e:
            self.logger.error(f"Cache set error: {e}")
            return False

    async def ping(self) -> bool:
        """Check the cache connection.

        Returns:
            True if the cache is disabled or answers PING
        """
        if not self.enabled or not self.client:
            return True

        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.error(f"Cache ping error: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.logger.info("Redis cache connection closed")

    def get_cache_key(self, slug: str) -> str:
        """Generate cache key for a slug.

        Args:
            slug: The slug

        Returns:
            Cache key
        """
        return f"{self.prefix}:cache:{slug}"
