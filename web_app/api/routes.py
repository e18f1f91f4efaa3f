"""API routes implementation."""

from fastapi import APIRouter, Request, Response, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    HealthResponse,
    ErrorResponse,
)
from slugcast.common.url_builder import build_short_url, public_base_url
from slugcast.errors import (
    InvalidRequestError,
    SlugConflictError,
    SlugSpaceExhaustedError,
    StoreError,
)

router = APIRouter()


def _short_url_for(request: Request, slug: str) -> str:
    config = request.app.state.config
    base_url = public_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    return build_short_url(slug=slug, base_url=base_url, path_prefix=config.path_prefix)


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": ShortenResponse, "description": "URL was already registered under this slug"},
        400: {"model": ErrorResponse, "description": "Invalid URL or slug"},
        409: {"model": ErrorResponse, "description": "Slug already maps to another URL"},
        500: {"model": ErrorResponse, "description": "Store failure or no slug available"},
    },
    summary="Create short URL",
    description="Register a URL. Optionally provide the slug to use.",
)
async def shorten_url(request: Request, response: Response, body: ShortenRequest):
    """Register a URL and return its slug."""
    service = request.app.state.service
    
    try:
        resolution = await service.shorten(body.url, body.slug)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SlugConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (SlugSpaceExhaustedError, StoreError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unable to register the URL: {e}",
        )
    
    if resolution.existed:
        response.status_code = status.HTTP_200_OK
    
    return ShortenResponse(
        url=body.url,
        slug=resolution.slug,
        short_url=_short_url_for(request, resolution.slug),
    )


@router.get(
    "/urls/{slug}",
    response_model=ShortenResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Slug not found"},
    },
    summary="Get URL information",
    description="Get the URL registered for a slug.",
)
async def get_url_info(request: Request, slug: str):
    """Get the URL registered for a slug."""
    service = request.app.state.service
    
    try:
        url = await service.get_original_url(slug)
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    
    if url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"URL for slug {slug} not found",
        )
    
    return ShortenResponse(url=url, slug=slug, short_url=_short_url_for(request, slug))


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
