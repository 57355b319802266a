"""
FastAPI Application Entry Point

Orders API - customers, menu items and orders with a status lifecycle.

Endpoints (all under /api/v1):
    - POST   /customers, DELETE /customers/{id}
    - POST   /items, GET /items, GET|PATCH|DELETE /items/{id}
    - POST   /orders, GET /orders, GET|PATCH /orders/{id}
    - GET    /health-check
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orders_api.core.config import Settings, get_settings, setup_logging
from orders_api.core.exceptions import AppException
from orders_api.database import Database
from orders_api.routes import api_router
from orders_api.services.preparation import build_preparation_service
from orders_api.services.preparation.base import BasePreparationService

logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database
    preparation_service: BasePreparationService = app.state.preparation_service

    # Startup
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    await database.connect(create_tables=settings.create_tables_on_startup)
    logger.info("✅ Database initialized")
    logger.info(f"✅ Preparation Service: {preparation_service.provider_name}")

    if settings.use_real_services:
        missing = settings.validate_production_config()
        if missing:
            logger.warning(f"⚠️ Missing production config: {missing}")

    logger.info("✅ Application ready!")

    yield  # Application runs

    # Shutdown
    logger.info("Shutting down...")
    await preparation_service.aclose()
    await database.dispose()
    logger.info("✅ Cleanup complete")


# =============================================================================
# ERROR HANDLERS
# =============================================================================

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Typed failures raised by controllers and use cases."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies rejected by FastAPI itself (e.g. invalid JSON)."""
    issues = [
        {"type": e.get("type"), "loc": list(e.get("loc", ())), "msg": e.get("msg")}
        for e in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Validation error!", "issues": issues})


def build_global_exception_handler(settings: Settings):
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")

        return JSONResponse(
            status_code=500,
            content={
                "message": "Internal Server Error",
                "detail": str(exc) if settings.debug else "An unexpected error occurred",
            },
        )
    return global_exception_handler


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    preparation_service: Optional[BasePreparationService] = None,
) -> FastAPI:
    """
    Build the application with explicitly constructed collaborators.

    Tests pass their own ``database`` and ``preparation_service``; otherwise
    both are built from settings.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Order management for a restaurant: customers, menu items and orders.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.database = database or Database(
        settings.database_url,
        echo=settings.database_echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.preparation_service = preparation_service or build_preparation_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, build_global_exception_handler(settings))

    app.include_router(api_router)

    return app


setup_logging()
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "orders_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        timeout_keep_alive=settings.request_timeout_seconds,
    )
