"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    URL and slug rules are checked by the service so that violations
    answer 400 rather than a schema error.
    """

    url: str = Field(..., description="The URL to shorten")
    slug: Optional[str] = Field(None, description="Optional caller-chosen slug; empty derives one from the URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                },
                {
                    "url": "https://github.com/user/repo",
                    "slug": "myrepo"
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """A registered slug."""

    url: str = Field(..., description="The original long URL")
    slug: str = Field(..., description="The slug denoting the URL")
    short_url: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/a",
                    "slug": "6c4b8a2f",
                    "short_url": "https://short.link/6c4b8a2f"
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Store status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
