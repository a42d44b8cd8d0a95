"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from swapquote.config import Settings, get_settings
from swapquote.errors import QuoteError
from swapquote.gas import GasResolver
from swapquote.routing.base import QuoteProvider
from swapquote.routing.factory import create_quote_provider
from swapquote.tokens import TokenRegistry
from swapquote.web.contracts.quotes import ErrorResponse
from swapquote.web.services.chain_service import ChainService
from swapquote.web.services.quote_service import QuoteEnrichmentService

logger = logging.getLogger(__name__)


def error_body(error: str, details: Optional[str] = None) -> dict:
    """Build the API error body."""
    response = ErrorResponse(
        error=error,
        details=details or None,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    return response.model_dump(exclude_none=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    yield
    # Shutdown
    await app.state.quote_service.provider.close()
    await app.state.quote_service.gas_resolver.cache.close()
    if app.state.http_client is not None:
        await app.state.http_client.aclose()
    logger.info("Quote service resources released")


async def quote_error_handler(request: Request, exc: QuoteError) -> JSONResponse:
    """Render typed quote failures with their status class."""
    if exc.status_code >= 500:
        logger.error(f"[Quote API] {request.url.path} failed: {exc}")
    else:
        logger.info(f"[Quote API] {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error, exc.details))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed parameters as 400 rather than FastAPI's 422."""
    return JSONResponse(
        status_code=400,
        content=error_body("Invalid request parameters", str(exc.errors())),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected failures."""
    logger.exception(f"[Quote API] Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=error_body("Internal server error", str(exc)))


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[QuoteProvider] = None,
    gas_resolver: Optional[GasResolver] = None,
    token_registry: Optional[TokenRegistry] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators can be injected (tests); otherwise they are built from
    settings.
    """
    settings = settings or get_settings()

    http_client = None
    if provider is None:
        http_client = httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)
        provider = create_quote_provider(settings=settings, http_client=http_client)
    gas_resolver = gas_resolver or GasResolver(settings=settings)
    token_registry = token_registry or TokenRegistry()

    app = FastAPI(
        title="swapquote API",
        description="Validated, slippage-adjusted swap quotes",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.http_client = http_client
    app.state.quote_service = QuoteEnrichmentService(
        provider=provider,
        gas_resolver=gas_resolver,
        token_registry=token_registry,
        settings=settings,
    )
    app.state.chain_service = ChainService(token_registry=token_registry, settings=settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(QuoteError, quote_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    from swapquote.api.routes import health
    from swapquote.web.controllers import chains_router, quotes_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(quotes_router)
    app.include_router(chains_router)

    return app
