"""Business logic service for the URL shortener."""

import logging
from typing import Optional, Dict

from .resolver import SlugResolver, Resolution
from .database.base import SlugStoreBase
from .database.cache import RedisCache
from .common.validators import is_valid_url, is_valid_slug
from .errors import InvalidRequestError


class SlugService:
    """Validates requests and fronts the resolver with the lookup cache."""

    def __init__(
        self,
        store: SlugStoreBase,
        cache: Optional[RedisCache] = None,
        resolver: Optional[SlugResolver] = None,
        logger: Optional[logging.Logger] = None,
        enable_custom_slugs: bool = True,
        timeout: Optional[float] = None,
    ):
        """Initialize the service.

        Args:
            store: Slug store
            cache: Optional lookup cache
            resolver: Optional resolver (built over store if omitted)
            logger: Optional logger
            enable_custom_slugs: Whether callers may choose their own slug
            timeout: Default deadline in seconds for store round trips
        """
        self.store = store
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = resolver or SlugResolver(store, timeout=timeout, logger=self.logger)
        self.enable_custom_slugs = enable_custom_slugs

    async def shorten(self, url: str, slug: Optional[str] = None) -> Resolution:
        """Register a URL and return its slug.

        Args:
            url: The URL to shorten
            slug: Optional caller-chosen slug; empty means derive one

        Returns:
            Resolution(slug, existed)

        Raises:
            InvalidRequestError: If the URL or slug is not acceptable
            SlugConflictError: If the slug is registered for another URL
            SlugSpaceExhaustedError: If no derived slug is available
            StoreError: If the store fails
        """
        is_valid, error = is_valid_url(url)
        if not is_valid:
            raise InvalidRequestError(f"Invalid URL: {error}")

        if slug:
            if not self.enable_custom_slugs:
                raise InvalidRequestError("Custom slugs are not enabled")

            is_valid, error = is_valid_slug(slug)
            if not is_valid:
                raise InvalidRequestError(f"Invalid slug: {error}")

        resolution = await self.resolver.resolve(url, slug)

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(resolution.slug), url)

        return resolution

    async def get_original_url(self, slug: str) -> Optional[str]:
        """Get the URL registered for a slug.

        Args:
            slug: The slug to lookup

        Returns:
            Original URL or None if not found

        Raises:
            StoreError: If the store fails
        """
        if self.cache:
            cached_url = await self.cache.get(self.cache.get_cache_key(slug))
            if cached_url:
                self.logger.debug(f"Cache hit for {slug}")
                return cached_url

        original_url = await self.resolver.lookup(slug)

        if original_url is None:
            self.logger.info(f"Slug not found: {slug}")
            return None

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(slug), original_url)

        self.logger.debug(f"Retrieved URL: {slug} -> {original_url}")
        return original_url

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()
        cache_healthy = await self.cache.ping() if self.cache else True

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close store and cache connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()
