"""Redis implementation of the slug store.

Each mapping is a single string key, written with SET NX so that the first
writer of a slug wins and later writers observe ALREADY_EXISTS:

    <prefix>:slug:<slug>  ->  <url>

Keys carry no TTL; mappings never expire.
"""

import functools
import logging
from typing import Any, Callable, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .base import SlugStoreBase
from .models import UrlRecord, PutResult
from ..errors import StoreError


def handle_redis_error(method: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a coroutine method so Redis failures surface as StoreError."""

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except RedisError as e:
            self.logger.error(f"Redis error in {method.__name__}: {e}")
            raise StoreError(f"Redis operation failed: {e}") from e

    return wrapper


class RedisSlugStore(SlugStoreBase):
    """Redis slug store."""

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "slugcast",
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL, ignored when client is given
            prefix: Namespace prepended to every key
            client: Optional pre-built redis.asyncio client
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self.client = client or redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
        )

    def slug_key(self, slug: str) -> str:
        return f"{self.prefix}:slug:{slug}"

    @handle_redis_error
    async def get(self, slug: str) -> Optional[UrlRecord]:
        url = await self.client.get(self.slug_key(slug))
        if url is None:
            return None
        return UrlRecord(slug=slug, url=url)

    @handle_redis_error
    async def put(self, slug: str, url: str) -> PutResult:
        created = await self.client.set(self.slug_key(slug), url, nx=True)
        if not created:
            return PutResult.ALREADY_EXISTS
        self.logger.info(f"Successfully added {slug}:{url} to Redis")
        return PutResult.CREATED

    async def health_check(self) -> bool:
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Redis connection closed")
