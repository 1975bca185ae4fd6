"""
Notes API Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers, routes and one
       NoteStore; `serve()` runs it under uvicorn on the configured port.
Who:   uvicorn (`uvicorn app.main:app`), the `notes-api` console script, tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐ │
    │  │  Request ID  │→│   Logging    │→│    CORS     │ │
    │  └──────────────┘ └──────────────┘ └─────────────┘ │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌────────────────┐ ┌─────────┐ │
    │  │ GET/POST notes │ │ GET notes/{id} │ │ health  │ │
    │  └────────────────┘ └────────────────┘ └─────────┘ │
    │                                                     │
    │  State:  app.state.note_store  (one NoteStore)      │
    │                                                     │
    │  Exception Handlers (all → {success: false, ...}):  │
    │  ValidationError→400 │ NotFound→404 │ other→500     │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import Settings, settings
from app.exceptions import NotesAPIError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDLogFilter,
    RequestIDMiddleware,
)
from app.routes import health, notes
from app.schemas.note import ErrorEnvelope
from app.services.note_store import NoteStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logging to stdout with request-id correlation.

    The filter sits on the handler, so records from every logger (ours,
    uvicorn's, starlette's) get a `request_id` attribute before formatting.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Our own access log replaces uvicorn's.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(message=message).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every failure to an error envelope: `{"success": false, "message": ...}`.

    Handler table:
        NotesAPIError subclasses → their status_code (400 / 404)
        RequestValidationError   → 400 (framework-level request validation)
        HTTPException            → its own status (unknown route, wrong method)
        Exception                → 500, traceback logged, generic message
    """

    @app.exception_handler(NotesAPIError)
    async def handle_notes_error(request: Request, exc: NotesAPIError):
        logger.warning(
            "%s %s rejected (%d): %s %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
            exc.context,
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.warning("Request validation failed: %s", exc.errors())
        return _error_response(400, "Invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorEnvelope(message=str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    # Rendered by ServerErrorMiddleware, outside the CORS and request-id
    # middleware, so those headers are added here.
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", exc, exc_info=True)
        response = _error_response(500, "An unexpected error occurred")

        rid = getattr(request.state, "request_id", None)
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid

        origin = request.headers.get("origin")
        if origin:
            origins = app.state.settings.cors_origins_list
            if "*" in origins:
                response.headers["Access-Control-Allow-Origin"] = "*"
            elif origin in origins:
                response.headers["Access-Control-Allow-Origin"] = origin
                response.headers["Access-Control-Allow-Credentials"] = "true"
                response.headers["Vary"] = "Origin"
            response.headers["Access-Control-Expose-Headers"] = REQUEST_ID_HEADER
        return response


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; the module-level `settings` by default.
        store:        NoteStore to serve; a fresh one (seeded according to
                      `seed_example_notes`) by default.

    Returns:
        A configured FastAPI instance whose `state.note_store` is the store
        every route handler receives.
    """
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(cfg.log_level)
        base = f"http://localhost:{cfg.port}"
        logger.info("Notes API Server running on %s (%d notes loaded)", base, len(app.state.note_store))
        logger.info("Available endpoints:")
        logger.info("   GET  %s/api/notes", base)
        logger.info("   POST %s/api/notes", base)
        logger.info("   GET  %s/api/notes/{id}", base)
        logger.info("   GET  %s/api/health", base)

        yield

        logger.info("Notes API Server shutting down")

    app = FastAPI(
        title="Notes API",
        description="In-memory notes service: list, create and fetch short text notes.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.note_store = store if store is not None else NoteStore(seed=cfg.seed_example_notes)

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → CORS → routes.
    origins = cfg.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    return app


def serve() -> None:
    """Entry point for the `notes-api` console script."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `app.main:app` to be importable.
app = create_app()


if __name__ == "__main__":
    serve()
