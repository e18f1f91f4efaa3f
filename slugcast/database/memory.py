"""In-memory slug store for tests and single-process deployments."""

import asyncio
import logging
from typing import Dict, Optional

from .base import SlugStoreBase
from .models import UrlRecord, PutResult


class InMemorySlugStore(SlugStoreBase):
    """Dictionary-backed store. Safe across tasks of one event loop."""
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, str] = {}
        self._lock = asyncio.Lock()
    
    async def get(self, slug: str) -> Optional[UrlRecord]:
        url = self._records.get(slug)
        if url is None:
            return None
        return UrlRecord(slug=slug, url=url)
    
    async def put(self, slug: str, url: str) -> PutResult:
        async with self._lock:
            if slug in self._records:
                return PutResult.ALREADY_EXISTS
            self._records[slug] = url
        self.logger.debug(f"Stored {slug} -> {url}")
        return PutResult.CREATED
    
    async def health_check(self) -> bool:
        return True
    
    async def close(self) -> None:
        return None
    
    def __len__(self) -> int:
        return len(self._records)
