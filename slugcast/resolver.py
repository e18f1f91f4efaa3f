"""Collision-aware slug resolution.

A URL's digest is cut into successive 8-character windows. Registration walks
those windows in order and stops at the first one that is either free or
already mapped to the same URL. A repeated submission walks the same windows,
so it stops at the same slot and reports an idempotent hit without writing.

The resolver holds no state of its own: every call re-reads the store, and
concurrent writers are arbitrated by the store's insert-if-absent put().
"""

import asyncio
import logging
from typing import Awaitable, NamedTuple, Optional, TypeVar

from .fingerprint import digest, candidate_windows, SLUG_LENGTH
from .database.base import SlugStoreBase
from .database.models import UrlRecord, PutResult
from .errors import SlugConflictError, SlugSpaceExhaustedError, StoreError


T = TypeVar("T")


class Resolution(NamedTuple):
    """Result of registering a URL."""

    slug: str
    existed: bool


class SlugResolver:
    """Find or assign the slug for a URL against a slug store."""

    def __init__(
        self,
        store: SlugStoreBase,
        timeout: Optional[float] = None,
        slug_length: int = SLUG_LENGTH,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the resolver.

        Args:
            store: Storage port used for every lookup and insert
            timeout: Default deadline in seconds for one resolve() or lookup()
            slug_length: Width of the candidate windows
            logger: Optional logger
        """
        self.store = store
        self.timeout = timeout
        self.slug_length = slug_length
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(
        self,
        url: str,
        requested_slug: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Resolution:
        """Register a URL, or find its existing registration.

        An empty or missing requested_slug derives the slug from the URL's
        digest; a non-empty one is used verbatim.

        Args:
            url: The URL to register
            requested_slug: Optional caller-chosen slug
            timeout: Deadline in seconds, overriding the resolver default

        Returns:
            Resolution(slug, existed), existed being True when nothing was written

        Raises:
            SlugConflictError: requested_slug already maps to another URL
            SlugSpaceExhaustedError: every candidate window maps to another URL
            StoreError: the store failed or the deadline expired
        """
        if requested_slug:
            operation = self._register_requested(url, requested_slug)
        else:
            operation = self._register_generated(url)

        return await self._with_deadline(operation, timeout)

    async def lookup(self, slug: str, timeout: Optional[float] = None) -> Optional[str]:
        """Return the URL registered for a slug, or None if there is none.

        Raises:
            StoreError: the store failed or the deadline expired
        """
        record = await self._with_deadline(self.store.get(slug), timeout)
        return record.url if record else None

    async def _with_deadline(self, operation: Awaitable[T], timeout: Optional[float]) -> T:
        timeout = timeout if timeout is not None else self.timeout
        if timeout is None:
            return await operation

        try:
            return await asyncio.wait_for(operation, timeout)
        except asyncio.TimeoutError as e:
            self.logger.error(f"Store operation timed out after {timeout}s")
            raise StoreError(f"Store operation timed out after {timeout}s") from e

    async def _register_generated(self, url: str) -> Resolution:
        url_digest = digest(url)

        for offset, candidate in enumerate(candidate_windows(url_digest, self.slug_length)):
            record = await self.store.get(candidate)

            if record is None:
                if await self.store.put(candidate, url) is PutResult.CREATED:
                    self.logger.info(f"Registered new slug {candidate} -> {url}")
                    return Resolution(candidate, False)
                # Another writer took the window between our read and our insert
                record = await self._reread(candidate)

            if record.url == url:
                self.logger.debug(f"Slug {candidate} already maps to {url}")
                return Resolution(candidate, True)

            self.logger.debug(f"Slug collision on {candidate} (offset {offset}) for {url}")

        self.logger.error(f"Slug space exhausted for {url}")
        raise SlugSpaceExhaustedError(url)

    async def _register_requested(self, url: str, slug: str) -> Resolution:
        record = await self.store.get(slug)

        if record is None:
            if await self.store.put(slug, url) is PutResult.CREATED:
                self.logger.info(f"Registered requested slug {slug} -> {url}")
                return Resolution(slug, False)
            record = await self._reread(slug)

        if record.url == url:
            self.logger.debug(f"Requested slug {slug} already maps to {url}")
            return Resolution(slug, True)

        self.logger.warning(f"Requested slug {slug} is taken by {record.url}")
        raise SlugConflictError(slug, record.url)

    async def _reread(self, slug: str) -> UrlRecord:
        record = await self.store.get(slug)
        if record is None:
            raise StoreError(f"Store reported slug '{slug}' as existing but it cannot be read back")
        return record
