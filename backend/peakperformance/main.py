"""
PeakPerformance Backend — FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware, routers, exception handlers and
       the database lifecycle in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
       Its collaborators (settings, database, password hasher) can be passed
       in; anything omitted is built from the environment.
Who:   uvicorn (`uvicorn peakperformance.main:app`), `python -m peakperformance`,
       and the test suite.

Lifecycle:
    Startup:
    1. Configure logging
    2. Build the Database from settings (unless one was injected)
    3. Optionally create missing tables
    4. Check connectivity and log the result

    Shutdown:
    1. Dispose the Database (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from peakperformance import __version__
from peakperformance.config import Settings
from peakperformance.database import Database
from peakperformance.exceptions import (
    DatabaseError,
    NotFoundError,
    PeakPerformanceError,
    ValidationError,
)
from peakperformance.middleware.access import AccessMiddleware, request_id_var
from peakperformance.routes import health
from peakperformance.routes.resources import include_resource_routers
from peakperformance.security import PasswordHasher
from peakperformance.services.catalog import build_resource_services

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # SQL echo is controlled by Database (echo=True at DEBUG)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Own the Database for the life of the process.

    An injected Database (tests) is used as-is; otherwise one is built from
    settings. Either way it is disposed on shutdown.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("PeakPerformance backend starting up (v%s)...", __version__)

    if app.state.database is None:
        # Fail fast: a sync driver URL would only surface on the first request
        settings.validate_database_url()
        app.state.database = Database.from_settings(settings)

    database: Database = app.state.database

    if settings.db_create_tables:
        await database.create_tables()
        logger.info("Resource tables checked/created")

    if await database.ping():
        logger.info("Connected to the PeakPerformance database")
    else:
        # Keep serving: requests will answer 500 until the database returns
        logger.error("Could not connect to the PeakPerformance database")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("PeakPerformance backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler table:
        ValidationError       → 400 {"error": <resource required message>}
        NotFoundError         → 404 {"error": <resource not-found message>}
        DatabaseError         → 500 {"error": <resource generic message>}
        PeakPerformanceError  → 500 (catch-all for custom errors)
        Exception             → 500 (unexpected errors)

    Bodies never contain driver messages, SQL or stack traces; those are
    logged with the request ID.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s %s", request_id_var.get(""), exc.message, exc.context)
        return _error(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(PeakPerformanceError)
    async def handle_application_error(request: Request, exc: PeakPerformanceError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last-resort 500.

        Starlette runs this handler in ServerErrorMiddleware, outside
        AccessMiddleware: the response has no X-Request-ID, no access line is
        written, and the exception is re-raised to the server after the
        response is sent. Services wrap every expected failure (database,
        hashing) in DatabaseError so that path stays for genuine bugs.
        """
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error(500, "Error interno del servidor")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    hasher: Optional[PasswordHasher] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted.
        database: Pool to use; built from settings at startup when omitted.
        hasher:   Credential hasher for the users resource.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    if settings is None:
        settings = Settings()
    if hasher is None:
        hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

    app = FastAPI(
        title="PeakPerformance API",
        description=(
            "CRUD backend for the PeakPerformance restaurant: products, inventory, "
            "orders, sales, invoices, notifications, surveys and users."
        ),
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: Access → GZip → CORS, so preflights get an ID too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    # Full resource listings are the only large bodies
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(AccessMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    include_resource_routers(app, build_resource_services(hasher))

    return app


# uvicorn expects `peakperformance.main:app` to be importable
app = create_app()
