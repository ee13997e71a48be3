"""
ContactBook Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the app from one Settings object, registers
       middleware, exception handlers and routers, and attaches a lifespan
       that owns the database engine.
Who:   uvicorn (`uvicorn contactbook.main:app`) or the `contactbook` script.

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the pooled async engine and session factory (app.state)

    Shutdown:
    1. Dispose the engine, closing every pooled connection
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contactbook import __version__
from contactbook.config import Settings
from contactbook.database import create_engine_from_settings, create_session_factory
from contactbook.exceptions import (
    ContactBookError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from contactbook.middleware.cors import WildcardCORSHeadersMiddleware
from contactbook.middleware.errors import UnhandledErrorMiddleware, unexpected_error_response
from contactbook.middleware.logging import RequestLoggingMiddleware
from contactbook.middleware.request_id import RequestIDMiddleware, request_id_var
from contactbook.routes import contacts, health

logger = logging.getLogger(__name__)

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOWED_HEADERS = ["Content-Type"]


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure root logging once at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party libraries log every request / statement at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Acquire the connection pool on startup and release it on shutdown.

    The engine lives on app.state for the whole process; requests borrow
    sessions from it through `get_db_session`.
    """
    settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings)
    logger.info("ContactBook Backend %s starting up...", __version__)

    engine = create_engine_from_settings(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Database engine ready (%s)", engine.url.render_as_string(hide_password=True))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    try:
        yield
    finally:
        # ── Shutdown ──────────────────────────────────────────────────────
        logger.info("ContactBook Backend shutting down...")
        await engine.dispose()
        logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_details(exc: RequestValidationError) -> list:
    """Reduce pydantic error dicts to JSON-safe loc/msg/type triples."""
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a uniform JSON body.

    Handler hierarchy:
        RequestValidationError  → 400 (malformed JSON, non-numeric or out-of-range id)
        ValidationError         → 400
        NotFoundError           → 404
        DatabaseError           → 500 (generic message, details logged)
        ContactBookError (base) → 500
        Exception (fallback)    → 500 (UnhandledErrorMiddleware answers route errors)
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """FastAPI would answer 422; client input errors are 400 here."""
        rid = request_id_var.get("")
        details = _validation_details(exc)
        logger.warning("[%s] Invalid request to %s %s: %s", rid, request.method, request.url.path, details)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "The request path or body is malformed.",
                "details": details,
                "request_id": rid,
            },
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the client; context goes to the server log only."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(ContactBookError)
    async def handle_app_error(request: Request, exc: ContactBookError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Last resort for failures inside the middleware chain itself."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return unexpected_error_response(rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use. Read from the environment and `.env`
                  when omitted. Stored on app.state.settings.

    Returns:
        A configured FastAPI instance. The database engine is created when
        the lifespan starts, not here.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="ContactBook API",
        description="CRUD service for contact records (id, name, email) backed by PostgreSQL.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → [wildcard CORS] → CORS → errors → routes
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
        expose_headers=["X-Request-ID"],
    )
    if "*" in settings.cors_origins_list:
        app.add_middleware(
            WildcardCORSHeadersMiddleware,
            allow_methods=CORS_ALLOWED_METHODS,
            allow_headers=CORS_ALLOWED_HEADERS,
        )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(contacts.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` on the configured host and port."""
    settings: Settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
