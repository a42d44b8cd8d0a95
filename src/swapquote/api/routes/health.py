"""Health check endpoints."""

from fastapi import APIRouter, Depends

from swapquote import __version__
from swapquote.config import Settings
from swapquote.web.controllers.deps import get_app_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "swapquote"}


@router.get("/health/detailed")
async def detailed_health(settings: Settings = Depends(get_app_settings)):
    """Detailed health check with configuration info."""
    return {
        "status": "healthy",
        "service": "swapquote",
        "version": __version__,
        "config": settings.get_safe_dict(),
    }
