"""FastAPI web application for slugcast."""

from .app_factory import create_app

__all__ = ["create_app"]
