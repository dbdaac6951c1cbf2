"""Rental admin API application.

Builds the FastAPI app: settings, exception handlers, CORS, the feature
routers under the API prefix and the status endpoint.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .__version__ import __version__
from .api.dependencies import get_database
from .api.exception_handlers import register_exception_handlers
from .config.settings import Settings, get_settings
from .database.connection import DatabaseManager
from .models.base import HealthCheckResponse, HealthStatus

logger = logging.getLogger(__name__)


def load_environment(project_root: Optional[Path] = None) -> None:
    """Load ``.env`` then ``.env.local`` overrides from the project root."""
    project_root = project_root or Path.cwd()

    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        logger.info(f"Loaded environment variables from {env_file}")

    env_local_file = project_root / ".env.local"
    if env_local_file.exists():
        load_dotenv(env_local_file, override=True)
        logger.info(f"Loaded local environment overrides from {env_local_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    database = DatabaseManager(app.state.settings)
    await database.create_pool()
    app.state.database = database
    logger.info(f"{app.state.settings.app_name} started")

    yield

    await database.close_pool()


status_router = APIRouter(tags=["System"])


@status_router.get("/status", response_model=HealthCheckResponse, summary="Service status")
async def get_status(
    request: Request,
    database: DatabaseManager = Depends(get_database),
) -> HealthCheckResponse:
    settings = request.app.state.settings
    database_ok = await database.health_check()
    state = HealthStatus.HEALTHY if database_ok else HealthStatus.UNHEALTHY
    return HealthCheckResponse(
        status=state,
        version=__version__,
        environment=settings.environment,
        database=state,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the rental admin API.

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Rental admin API with feature-based authorization",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app, is_production=settings.is_production)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from .features.devices.routers import router as devices_router
    from .features.expenses.routers import router as expenses_router
    from .features.orders.routers import router as orders_router
    from .features.users.routers import router as users_router

    app.include_router(status_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(devices_router, prefix=settings.api_prefix)
    app.include_router(orders_router, prefix=settings.api_prefix)
    app.include_router(expenses_router, prefix=settings.api_prefix)

    return app
