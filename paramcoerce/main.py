"""
FastAPI application entry point for the paramcoerce service.

This module creates the FastAPI app instance, registers the routers and
installs the exception handlers that turn parameter validation failures
into 400 responses.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from paramcoerce.config import VALID_LOG_LEVELS, settings
from paramcoerce.errors import ParameterValidationError
from paramcoerce.routes.health import router as health_router
from paramcoerce.routes.parameters import router as parameters_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL if settings.LOG_LEVEL in VALID_LOG_LEVELS else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ORIGINS (explicit list)
    - anything else: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = [origin.strip() for origin in settings.CORS_ORIGINS if origin.strip()]
        logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


async def parameter_validation_exception_handler(request: Request, exc: ParameterValidationError):
    """
    Turn a parameter validation failure raised anywhere in a request
    (typically a ``scalar_parameter`` dependency) into a 400 response.

    The body mirrors HTTPException's shape: {"detail": {"error", "details", "parameter"}}.
    """
    logger.info(
        f"Rejected {exc.location or 'request'} parameter {exc.parameter!r} "
        f"on {request.method} {request.url.path}: {exc.error_code}"
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.to_detail()}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    This helps diagnose 422 errors from malformed request bodies.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "details": jsonable_errors(exc),
        }
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Drop non-serializable context (exception instances) from pydantic errors."""
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


def register_exception_handlers(application: FastAPI) -> None:
    """Install the parameter and request validation handlers on an app."""
    application.add_exception_handler(ParameterValidationError, parameter_validation_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)


# Create FastAPI app
app = FastAPI(
    title="paramcoerce API",
    description="Schema-driven coercion and validation of scalar request parameters",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

register_exception_handlers(app)

# Configure CORS with environment-based origins
cors_origins = _get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(parameters_router)

logger.info("FastAPI app initialized successfully")
