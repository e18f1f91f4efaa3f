"""Abstract base class for slug store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import UrlRecord, PutResult


class SlugStoreBase(ABC):
    """Storage port consumed by the slug resolver.
    
    Implementations must be safe for concurrent use from many tasks and must
    enforce slug uniqueness themselves: put() is insert-if-absent and never
    overwrites an existing record.
    """
    
    @abstractmethod
    async def get(self, slug: str) -> Optional[UrlRecord]:
        """Look up a slug.
        
        Args:
            slug: The slug to lookup
            
        Returns:
            The stored record, or None if the slug is not registered
            
        Raises:
            StoreError: If the read fails
        """
        pass
    
    @abstractmethod
    async def put(self, slug: str, url: str) -> PutResult:
        """Insert a mapping unless the slug is already taken.
        
        Args:
            slug: The slug to register
            url: The URL it denotes
            
        Returns:
            PutResult.CREATED if written, PutResult.ALREADY_EXISTS if the slug
            was taken (whatever URL it maps to)
            
        Raises:
            StoreError: If the write fails
        """
        pass
    
    async def initialize(self) -> None:
        """Create tables or key spaces if the backend needs them."""
        return None
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Release connections."""
        pass
