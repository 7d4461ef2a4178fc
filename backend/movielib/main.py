"""
Movie Library API - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own MovieStore and ReviewStore on app.state.
Who:   uvicorn (`uvicorn movielib.main:app`), the `movielib` console script,
       and the test suite (one fresh app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Request ID  │→│ Logging  │→│  GZip / CORS    │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /movies...   │ │ /reviews │ │ / and /health   │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  State:                                             │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ movie_store │ review_store │ settings        │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from movielib import __version__
from movielib.config import Settings, settings as default_settings
from movielib.exceptions import (
    MalformedInputError,
    MovieLibraryError,
    NotFoundError,
    ValidationError,
)
from movielib.middleware.logging import RequestLoggingMiddleware
from movielib.middleware.request_id import RequestIDMiddleware, request_id_var
from movielib.routes import health, movies, reviews, root
from movielib.services import MovieStore, ReviewStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout, so container runtimes pick it up.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report the listening address.
    Shutdown: report how many records are being discarded; nothing is saved.
    """
    config: Settings = app.state.settings
    setup_logging(config.log_level)
    logger.info("Movie Library API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", config.app_host, config.app_port)
    logger.info("API docs: http://%s:%d/docs", config.app_host, config.app_port)

    yield

    logger.info(
        "Shutting down; discarding %d movies and %d reviews held in memory",
        app.state.movie_store.count(),
        app.state.review_store.count(),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(exc: MovieLibraryError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.context,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error envelope.

    Handler hierarchy:
        MalformedInputError     → 400 Bad Request
        RequestValidationError  → 400 Bad Request (FastAPI would send 422)
        ValidationError         → 400 Bad Request
        NotFoundError           → 404 Not Found
        MovieLibraryError       → its status_code
        Exception (fallback)    → 500 Internal Server Error, trace logged only
    """

    @app.exception_handler(MalformedInputError)
    async def handle_malformed_input(request: Request, exc: MalformedInputError):
        logger.warning("[%s] Malformed input: %s", request_id_var.get(""), exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        logger.warning("[%s] Invalid request: %s", request_id_var.get(""), errors)
        return _error_response(
            MalformedInputError(message="Invalid request body", context={"errors": errors})
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(exc)

    @app.exception_handler(MovieLibraryError)
    async def handle_library_error(request: Request, exc: MovieLibraryError):
        logger.error("[%s] %s: %s", request_id_var.get(""), type(exc).__name__, exc.message)
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Generic 500 for the client; the stack trace goes to the log only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use. Defaults to the environment-loaded
                  module singleton.

    Returns:
        A FastAPI instance with empty stores of its own.
    """
    config = settings or default_settings

    app = FastAPI(
        title="Movie Library API",
        description="In-memory catalog of movies and their reviews.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.movie_store = MovieStore()
    app.state.review_store = ReviewStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware, skip_paths=config.access_log_skip_paths_list)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(movies.router)
    app.include_router(reviews.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    uvicorn.run(
        app,
        host=default_settings.app_host,
        port=default_settings.app_port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
