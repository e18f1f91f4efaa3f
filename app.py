#!/usr/bin/env python3
"""
Main entry point for the slugcast service.

Concurrency: each request runs as its own task on the event loop
(FastAPI + asyncpg pool or redis.asyncio). The store handle is the only
shared resource. With WORKERS > 1, uvicorn spawns that many processes, each
importing create_server_app and opening its own connection pool. The memory
backend is per process, so use postgres or redis with more than one worker.

Usage:
    python app.py

Environment variables:
    STORAGE_BACKEND - memory, postgres or redis
    DATABASE_URL - PostgreSQL connection URL
    DATABASE_CREATE_TABLES - Set to true to create the urls table on startup
    REDIS_URL - Redis connection URL for the redis backend
    CACHE_URL - Redis connection URL for the lookup cache (optional)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
    LOG_REQUESTS - Set to false to drop per-request INFO lines
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from slugcast.config import load_config
from slugcast.database import RedisCache, create_store
from slugcast.service import SlugService
from slugcast.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting slugcast service...")

    logger.info(f"Using {config.storage_backend} slug store")
    store = create_store(config, logger=logger)
    await store.initialize()

    if config.cache_url:
        logger.info("Connecting to Redis lookup cache")
        cache = RedisCache(
            redis_url=config.cache_url,
            ttl_seconds=config.cache_ttl_seconds,
            prefix=config.redis_prefix,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")
        cache = None

    service = SlugService(
        store=store,
        cache=cache,
        logger=logger,
        enable_custom_slugs=config.enable_custom_slugs,
        timeout=config.store_timeout_seconds,
    )

    app.state.store = store
    app.state.cache = cache
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down slugcast service...")
    await service.close()
    logger.info("Service stopped")


def _configure_logging(config):
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
        log_requests=config.log_requests,
    )


def build_server_app(config, logger) -> FastAPI:
    """Build the app; store, cache and service are created in lifespan."""
    app = create_app(
        store_instance=None,
        cache_instance=None,
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def create_server_app() -> FastAPI:
    """App factory imported by each uvicorn worker process."""
    config = load_config()
    return build_server_app(config, _configure_logging(config))


def main():
    """Main entry point."""
    config = load_config()
    logger = _configure_logging(config)

    logger.info("slugcast URL shortener")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url', 'cache_url'})}")

    if config.workers > 1:
        # uvicorn only forks workers for an import string; it supervises signals itself
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            "app:create_server_app",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=False,
        )
        return

    uvicorn_config = uvicorn.Config(
        build_server_app(config, logger),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except OSError as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
