"""
Odoo Signup - Main Application Entry Point
Self-service signup that provisions one Odoo database per customer
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import structlog

from odoo_signup.api import pages, signup
from odoo_signup.core.config import Settings, get_settings
from odoo_signup.core.exceptions import SignupError
from odoo_signup.core.rate_limit import TokenBucket
from odoo_signup.core.request_logging import RequestLoggingMiddleware
from odoo_signup.schemas.signup import SignupResponse
from odoo_signup.services.odoo import OdooClient
from odoo_signup.services.provisioning import ProvisioningService

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = structlog.get_logger(__name__)


def configure_logging(level: str) -> None:
    """Configure structured JSON logging"""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _failure(status_code: int, message: str) -> JSONResponse:
    body = SignupResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


async def signup_error_handler(request: Request, exc: SignupError) -> JSONResponse:
    """Render signup errors as {success: false, message}"""
    return _failure(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or invalid requests as 400 instead of 422"""
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        logger.warning("Invalid JSON in signup request", path=request.url.path)
        return _failure(400, "Invalid request format")

    details = [_format_validation_error(error) for error in errors]
    logger.warning("Validation failed for signup request", path=request.url.path, errors=details)
    return _failure(400, "Validation failed: " + "; ".join(details))


def create_app(
    settings: Optional[Settings] = None,
    odoo_client: Optional[OdooClient] = None,
    provisioning_service: Optional[ProvisioningService] = None,
) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Configuration (defaults to the environment)
        odoo_client: Odoo client (defaults to one built from settings)
        provisioning_service: Fully wired service, mainly for tests
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    if provisioning_service is None:
        odoo_client = odoo_client or OdooClient.from_settings(settings)
        provisioning_service = ProvisioningService(settings, odoo_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        logger.info(
            "Starting Odoo Signup server",
            environment=settings.ENVIRONMENT,
            odoo_url=settings.ODOO_URL,
            domain=settings.DOMAIN,
            default_db_mode=settings.DEFAULT_DB_MODE,
            template_database=settings.TEMPLATE_DATABASE,
            rate_limit=settings.RATE_LIMIT,
            burst_limit=settings.BURST_LIMIT,
            timeout_seconds=settings.HTTP_TIMEOUT_SECONDS,
        )

        yield

        logger.info("Shutting down Odoo Signup server")
        provisioning_service.client.close()

    app = FastAPI(
        title="Odoo Signup API",
        description="Provision Odoo instances by creating or cloning databases",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.provisioning_service = provisioning_service
    app.state.rate_limiter = TokenBucket(settings.RATE_LIMIT, settings.BURST_LIMIT)

    # Configure middleware stack
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(SignupError, signup_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Include routers
    app.include_router(signup.router, prefix="/api", tags=["signup"])
    app.include_router(pages.router, tags=["pages"])
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    # Each worker process builds its own app through create_app
    uvicorn.run(
        "odoo_signup.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL,
    )
