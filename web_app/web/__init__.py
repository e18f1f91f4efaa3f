"""Browser-facing routes: home page and slug redirects."""

from .routes import router as web_router

__all__ = ["web_router"]
