"""Storage layer for the slug resolver."""

from .base import SlugStoreBase
from .models import UrlRecord, PutResult
from .memory import InMemorySlugStore
from .postgres import PostgresSlugStore
from .redis_store import RedisSlugStore
from .cache import RedisCache
from .factory import create_store

__all__ = [
    "SlugStoreBase",
    "UrlRecord",
    "PutResult",
    "InMemorySlugStore",
    "PostgresSlugStore",
    "RedisSlugStore",
    "RedisCache",
    "create_store",
]
