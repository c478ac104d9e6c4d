"""
Notes API: FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the app, constructs its NoteStore, registers
       middleware, exception handlers and routes, and returns it.
Who:   uvicorn (via run() or `uvicorn notes_api.main:app`) and the test suite.
When:  Once per process at startup; tests build a fresh app per test.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Request ID  │→│ Logging  │→│  Body Limit     │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────────┐ ┌───────────┐  │
    │  │ GET/POST     │ │ PATCH/DELETE   │ │ GET       │  │
    │  │ /notes       │ │ /notes/{id}    │ │ /health   │  │
    │  └──────────────┘ └────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→422 │ NotFound→404 │ bad JSON→400 │   │
    │  │ unmatched route/method→404 (empty body)      │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  State:  app.state.note_store (NoteStore)           │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from notes_api import __version__
from notes_api.config import Settings, settings
from notes_api.exceptions import NotesError, NotFoundError, ValidationError
from notes_api.middleware.body_limit import BodySizeLimitMiddleware
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_api.routes import health, notes
from notes_api.storage.note_store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access middleware replaces uvicorn's access log.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce the bind address.
    Shutdown: report how many notes are being discarded.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("Notes API %s starting on http://%s", __version__, app_settings.bind_address)

    yield

    # Notes are process-lifetime only.
    remaining = await app.state.note_store.count()
    logger.info("Notes API shutting down, discarding %d in-memory notes", remaining)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_content(error: str, message: str, details: Optional[dict] = None) -> dict:
    return {
        "error": error,
        "message": message,
        "details": details,
        "request_id": request_id_var.get(""),
    }


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError          → 422 (update with no fields)
        NotFoundError            → 404 (unknown note id)
        NotesError (base)        → exc.status_code
        RequestValidationError   → 400 unparsable JSON, 422 wrong shape
        Starlette 404 / 405      → 404, empty body
        Exception (fallback)     → 500, details logged server-side only
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info("Validation error: %s", exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(exc.error_code, exc.message, exc.context),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(exc.error_code, exc.message, exc.context),
        )

    @app.exception_handler(NotesError)
    async def handle_notes_error(request: Request, exc: NotesError):
        logger.error("Application error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(exc.error_code, exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """
        Body could not be turned into the request model.

        "json_invalid" means the bytes were not JSON at all (400); anything
        else is JSON of the wrong shape, e.g. a missing title (422).
        """
        errors = jsonable_encoder(exc.errors())
        if any(err.get("type") == "json_invalid" for err in errors):
            return JSONResponse(
                status_code=400,
                content=_error_content(
                    "bad_request", "Request body is not valid JSON", {"errors": errors}
                ),
            )
        return JSONResponse(
            status_code=422,
            content=_error_content(
                "validation_error", "Request body has the wrong shape", {"errors": errors}
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Unmatched path or method.

        405 is folded into 404: a wrong method on a known path is answered
        exactly like an unknown path, with no body.
        """
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content("http_error", str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_content(
                "internal_server_error",
                "An unexpected error occurred.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the module-level `settings`.

    Returns:
        Configured FastAPI instance owning a fresh, empty NoteStore.
    """
    app_settings = app_settings or settings
    docs = app_settings.enable_docs

    app = FastAPI(
        title="Notes API",
        description="Minimal in-memory notes service.",
        version=__version__,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        # "/notes/" is an unknown path (404), not a redirect to "/notes".
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Application State ─────────────────────────────────────────────────
    # One store per app, handed to handlers through notes_api.dependencies.
    app.state.settings = app_settings
    app.state.note_store = NoteStore(id_start=app_settings.id_start)
    app.state.started_at = time.monotonic()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → BodySizeLimit → routes
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=app_settings.max_body_bytes)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app on settings.host:settings.port."""
    import uvicorn

    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `notes_api.main:app` to be importable
app = create_app()
