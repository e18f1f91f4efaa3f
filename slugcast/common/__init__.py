"""Common utilities."""

from .validators import is_valid_url, is_valid_slug
from .url_builder import build_short_url, public_base_url
from .logging_config import setup_logging, JsonFormatter, REQUEST_LOGGER

__all__ = [
    "is_valid_url",
    "is_valid_slug",
    "build_short_url",
    "public_base_url",
    "setup_logging",
    "JsonFormatter",
    "REQUEST_LOGGER",
]
