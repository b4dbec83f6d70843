"""Main FastAPI application for the player catalog backend."""

from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import structlog

from player_catalog import __version__
from player_catalog.core import (
    BadRequestError,
    PlayerNotFoundError,
    db_manager,
    get_global_settings,
)
from player_catalog.core.logging import setup_logging
from player_catalog.core.rate_limiter import limiter
from player_catalog.features.players import players_router
from player_catalog.init_db import init_db

settings = get_global_settings()
setup_logging(settings.log_level, debug=settings.debug)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up player catalog application")
    if settings.create_tables_on_startup:
        await init_db()
    yield
    logger.info("Shutting down player catalog application")
    await db_manager.close()


async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    """Map invalid caller input to HTTP 400."""
    logger.info(
        "bad_request",
        path=request.url.path,
        error_message=exc.message,
        field=exc.field,
    )
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def not_found_handler(
    request: Request, exc: PlayerNotFoundError
) -> JSONResponse:
    """Map missing players to HTTP 404."""
    logger.info("player_not_found", path=request.url.path, player_id=exc.player_id)
    return JSONResponse(status_code=404, content={"detail": exc.message})


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Create, read, update, delete and filter game characters.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

# Create FastAPI application
app = FastAPI(
    title="Player Catalog Service",
    description="""
    CRUD backend for a game-character catalog.

    ## Features

    * **Players**: Create, update and delete characters
    * **Listing**: Filter by name, title, race, profession, birthday,
      experience, level and ban status, with paging and ordering
    * **Levels**: Level and experience-to-next-level are derived from experience
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure rate limiter for FastAPI app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
app.add_exception_handler(BadRequestError, bad_request_handler)  # type: ignore[arg-type]
app.add_exception_handler(PlayerNotFoundError, not_found_handler)  # type: ignore[arg-type]

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(players_router, prefix="/rest", tags=["players"])


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns the health status of the application including
    the application version and debug mode status.
    """
    return {
        "status": "healthy",
        "message": "Application is running",
        "version": __version__,
        "debug": settings.debug,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "player_catalog.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
