"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from slugcast.config import Config
from slugcast.database.memory import InMemorySlugStore
from slugcast.fingerprint import digest, candidate_windows
from slugcast.resolver import SlugResolver
from slugcast.service import SlugService
from slugcast.common.logging_config import setup_logging
from web_app import create_app


class CountingStore(InMemorySlugStore):
    """In-memory store that records every put() call."""
    
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.puts = []
    
    async def put(self, slug, url):
        self.puts.append((slug, url))
        return await super().put(slug, url)


async def _occupy_windows(store, url, count):
    """Map the first `count` candidate windows of `url` to other URLs."""
    windows = list(candidate_windows(digest(url)))
    for offset, window in enumerate(windows[:count]):
        await InMemorySlugStore.put(store, window, f"https://other.example.com/{offset}")
    return windows


@pytest.fixture
def occupy_windows():
    """Seed helper: occupy the first windows of a URL with other URLs."""
    return _occupy_windows


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Empty in-memory store that counts writes."""
    return CountingStore(logger=logger)


@pytest.fixture
def resolver(store, logger):
    """Resolver over the test store."""
    return SlugResolver(store, logger=logger)


@pytest.fixture
def service(store, logger):
    """Create service instance."""
    return SlugService(store=store, cache=None, logger=logger)


@pytest.fixture
def config():
    """Configuration for the test app."""
    return Config(storage_backend="memory", base_url="http://testserver")


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        cache_instance=None,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/a",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
