"""FastAPI dependencies resolving shared services from app state."""

from fastapi import Request

from swapquote.config import Settings
from swapquote.web.services.chain_service import ChainService
from swapquote.web.services.quote_service import QuoteEnrichmentService


def get_quote_service(request: Request) -> QuoteEnrichmentService:
    """Resolve the quote enrichment service from FastAPI app state."""
    service = getattr(request.app.state, "quote_service", None)
    if service is None:
        raise RuntimeError("Quote service is not initialized in app.state.quote_service")
    return service


def get_chain_service(request: Request) -> ChainService:
    """Resolve the chain service from FastAPI app state."""
    service = getattr(request.app.state, "chain_service", None)
    if service is None:
        raise RuntimeError("Chain service is not initialized in app.state.chain_service")
    return service


def get_app_settings(request: Request) -> Settings:
    """Resolve the settings the application was created with."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings are not initialized in app.state.settings")
    return settings
