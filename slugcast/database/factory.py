"""Build the configured slug store."""

import logging
from typing import Optional

from .base import SlugStoreBase
from .memory import InMemorySlugStore
from .postgres import PostgresSlugStore
from .redis_store import RedisSlugStore


STORAGE_BACKENDS = ("memory", "postgres", "redis")


def create_store(config, logger: Optional[logging.Logger] = None) -> SlugStoreBase:
    """Create a store for config.storage_backend.
    
    Args:
        config: Application configuration
        logger: Optional logger passed to the store
        
    Returns:
        An uninitialized store; call initialize() before first use
        
    Raises:
        ValueError: If the backend name is unknown
    """
    backend = config.storage_backend.strip().lower()
    
    if backend == "memory":
        return InMemorySlugStore(logger=logger)
    
    if backend == "postgres":
        return PostgresSlugStore(
            database_url=config.database_url,
            pool_max_size=config.pool_max_size,
            connection_timeout_seconds=config.store_timeout_seconds,
            create_tables=config.database_create_tables,
            logger=logger,
        )
    
    if backend == "redis":
        return RedisSlugStore(
            redis_url=config.redis_url,
            prefix=config.redis_prefix,
            logger=logger,
        )
    
    raise ValueError(
        f"Unknown storage backend '{config.storage_backend}' "
        f"(expected one of: {', '.join(STORAGE_BACKENDS)})"
    )
