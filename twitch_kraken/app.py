"""FastAPI application factory for the demo server"""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from twitch_kraken.core.config import get_settings
from twitch_kraken.core.dependencies import close_client, get_access_store, get_client
from twitch_kraken.core.errors import (
    DecodeError,
    DomainError,
    MissingScopeError,
    RequestConstructionError,
    TransportError,
    TwitchError,
)
from twitch_kraken.core.logging import setup_logging
from twitch_kraken.routers import auth_router, users_router

logger = logging.getLogger(__name__)

_start_time: float = 0.0


def error_status(exc: TwitchError) -> int:
    """HTTP status the demo server answers with for a client error."""
    if isinstance(exc, MissingScopeError):
        return 403
    if isinstance(exc, DomainError):
        return exc.status_code if 400 <= exc.status_code < 500 else 502
    if isinstance(exc, RequestConstructionError):
        return 400
    if isinstance(exc, (TransportError, DecodeError)):
        return 502
    return 500


async def twitch_error_handler(request: Request, exc: TwitchError) -> JSONResponse:
    status = error_status(exc)
    logger.warning(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "message": str(exc)},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle startup and shutdown"""
    global _start_time
    _start_time = time.time()

    settings = get_settings()
    logger.info("Starting Kraken demo server")
    logger.info(f"Authorize at http://{settings.host}:{settings.port}/")

    yield

    logger.info("Shutting down Kraken demo server")
    try:
        await close_client()
    except Exception as e:
        logger.exception(f"Error during shutdown: {e}")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()

    setup_logging(settings)

    app = FastAPI(
        title="Kraken Demo",
        description="Demo server exercising the Twitch Kraken client",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_exception_handler(TwitchError, twitch_error_handler)

    app.include_router(auth_router.build_router(get_client(), get_access_store(), settings.scopes))
    app.include_router(users_router.router)

    # Liveness probe, no Twitch dependency
    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "authorized": get_access_store().access is not None,
            "uptime_seconds": int(time.time() - _start_time),
        }

    logger.info("FastAPI application configured")

    return app
