"""Data models for the slug store."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class UrlRecord:
    """A persisted slug -> URL mapping. Never mutated once stored."""
    
    slug: str
    url: str
    
    @classmethod
    def from_dict(cls, data: dict) -> "UrlRecord":
        """Create from dictionary."""
        return cls(slug=data["slug"], url=data["url"])


class PutResult(str, Enum):
    """Outcome of an insert-if-absent write."""
    
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
