"""
Tracklog API

FastAPI application for GPS + elevation session logging.
"""

from contextlib import asynccontextmanager
import logging
import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from tracklog import __version__
from tracklog.api.router import api_router
from tracklog.config import Settings
from tracklog.db.session import Database
from tracklog.features.elevation import ElevationClient
from tracklog.shared.errors import TracklogError, UpstreamError


logger = logging.getLogger(__name__)


# === Logging Setup ===
def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logger.info("Starting Tracklog API...")
    await app.state.db.init()
    logger.info("Database initialized")

    yield

    # Shutdown
    await app.state.db.dispose()
    logger.info("Shutting down...")


# === Error Handlers ===
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Missing or empty body/form fields are a plain 400."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    logger.info(f"Rejected {request.method} {request.url.path}: missing {fields}")
    return PlainTextResponse("Missing data", status_code=400)


async def tracklog_error_handler(request: Request, exc: TracklogError):
    """Last-resort conversion of domain errors that escaped a route."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    if isinstance(exc, UpstreamError):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return PlainTextResponse("Internal server error", status_code=500)


# === App Creation ===
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Resolved configuration; read from env/.env if omitted

    Returns:
        FastAPI app with its own database engine and elevation client
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Tracklog API",
        description="GPS + elevation session logging",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.db = Database(settings)
    app.state.elevation = ElevationClient.from_settings(settings)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TracklogError, tracklog_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # === Routes ===
    app.include_router(api_router)

    # === Health Check ===
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # === Static Files ===
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.static_dir), html=True), name="static")
        logger.info(f"Serving static files from {settings.static_dir}")

    return app


app = create_app()
