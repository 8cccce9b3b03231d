"""
API module for the Tinify relay.
"""
import logging
from typing import Optional

import tinify
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from tinifier.api.compress import METADATA_HEADERS, router as compress_router
from tinifier.api.status import router as status_router
from tinifier.config import Settings
from tinifier.core.client import TinifyClient
from tinifier.core.errors import (
    FREE_TIER_MONTHLY_LIMIT,
    InvalidInputError,
    PayloadTooLargeError,
    TinifierError
)
from tinifier.models.base import ServiceInfo

# Set up logging
logger = logging.getLogger(__name__)

SERVICE_NAME = "Figma-Tinifier"
SERVICE_VERSION = "1.0.0"

# Routes whose body is base64 JSON, capped before parsing
JSON_UPLOAD_PATHS = ("/api/compress",)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # Drop the leading "body"/"query" segment from the location
        location = ".".join(str(p) for p in err.get("loc", ())[1:]) or "request"
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[TinifyClient] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Service settings; read from the environment when omitted
        client: Compression service handle; built from settings.api_key when omitted

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = Settings.from_env()
    if client is None:
        client = TinifyClient(settings.api_key)

    app = FastAPI(
        title="Figma-Tinifier",
        description="""
        Relay for the Tinify image compression API.

        Accepts images as base64 JSON or multipart uploads, optionally resizes,
        converts (png, jpeg, webp, avif) and flattens them, and returns the
        compressed result with size savings.
        """,
        version=SERVICE_VERSION
    )
    app.state.settings = settings
    app.state.client = client

    # Registered before CORS so CORS wraps it
    @app.middleware("http")
    async def limit_json_body(request: Request, call_next):
        if request.method == "POST" and request.url.path in JSON_UPLOAD_PATHS:
            length = request.headers.get("content-length", "")
            if length.isdigit() and int(length) > settings.max_json_body_size:
                error = PayloadTooLargeError(
                    f"Request body exceeds the {settings.max_json_body_size} byte limit"
                )
                logger.warning(f"Rejected {length} byte body on {request.url.path}")
                return JSONResponse(status_code=error.status_code, content=error.to_dict())
        return await call_next(request)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=list(METADATA_HEADERS),
    )

    # Include routers
    app.include_router(compress_router, prefix="/api")
    app.include_router(status_router, prefix="/api")

    @app.exception_handler(TinifierError)
    async def tinifier_error_handler(request: Request, exc: TinifierError):
        """Render relay errors as {error, message} JSON."""
        logger.warning(
            f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}"
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": InvalidInputError.error, "message": _describe_validation_errors(exc)}
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unexpected errors."""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)}
        )

    @app.get("/", response_model=ServiceInfo)
    async def root():
        """Liveness check."""
        return ServiceInfo(service=SERVICE_NAME, status="running", version=SERVICE_VERSION)

    @app.get("/health")
    async def health_check():
        """Check if the API is running."""
        return {"status": "healthy", "version": SERVICE_VERSION}

    @app.on_event("startup")
    async def validate_api_key():
        """Log whether the configured key works; never blocks startup."""
        logger.info("Validating API key...")
        try:
            await run_in_threadpool(client.validate)
        except tinify.Error as e:
            logger.error(f"API key validation failed: {e}")
            return
        logger.info("API key validated successfully")
        logger.info(
            f"Compressions used this month: {client.compression_count}/{FREE_TIER_MONTHLY_LIMIT}"
        )

    return app


app = create_app()
