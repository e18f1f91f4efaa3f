"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from slugcast.errors import StoreError

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the homepage with the shorten form."""
    config = request.app.state.config
    return templates.TemplateResponse(
        request,
        "home.html",
        {"custom_slugs": config.enable_custom_slugs},
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


@router.get("/{slug}", include_in_schema=False)
async def redirect_to_url(request: Request, slug: str):
    """Redirect to the URL registered for the slug."""
    service = request.app.state.service
    
    try:
        original_url = await service.get_original_url(slug)
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    
    if not original_url:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"URL for slug {slug} not found",
        )
    
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
