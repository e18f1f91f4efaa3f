"""Middleware for the slugcast web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
