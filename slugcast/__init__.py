"""Core slug resolution logic for the URL shortener."""

from .fingerprint import digest, candidate_windows
from .resolver import SlugResolver, Resolution
from .service import SlugService

__all__ = ["digest", "candidate_windows", "SlugResolver", "Resolution", "SlugService"]
