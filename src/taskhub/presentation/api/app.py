"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All resource endpoints live under the /api prefix. The health check and
the info endpoint stay at /health and / for load balancers and monitoring.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from taskhub.infrastructure.persistence.sqlalchemy import build_engine
from taskhub.infrastructure.persistence.sqlalchemy.init_db import create_tables
from taskhub.presentation.api.dependencies import (
    build_session_maker,
    get_db_session,
    get_engine,
    prepare_database_url,
)
from taskhub.presentation.api.exception_handlers import setup_exception_handlers
from taskhub.presentation.api.routers import (
    auth_router,
    tasks_router,
    users_router,
)
from taskhub.presentation.api.schemas.common import HealthResponse
from taskhub_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the taskhub application with:
    - Console output with timestamps and module names
    - Configurable log level for taskhub modules
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("taskhub").setLevel(log_level)
    logging.getLogger("taskhub_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration and login.

- Register with full name, email, password and age
- Login with email and password to obtain a bearer token
- Passwords are hashed with bcrypt
""",
    },
    {
        "name": "Tasks",
        "description": """Tasks owned by users.

Filter by completion state, owner, creation window, title or owner name.
Every task response carries its owner's name and email.
""",
    },
    {
        "name": "Users",
        "description": """User management.

Deleting a user deletes all of their tasks.
""",
    },
    {
        "name": "Health",
        "description": "Service health check for monitoring.",
    },
]


def _build_lifespan(engine: AsyncEngine):
    """Create the lifespan manager owning the schema and pool of ``engine``."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting TaskHub API v%s...", API_VERSION)
        try:
            await create_tables(engine)
        except ConnectionRefusedError:
            logger.critical("Could not connect to the database.")
            raise SystemExit(1) from None
        yield

        logger.info("Shutting down TaskHub API...")
        await engine.dispose()
        logger.info("Database connections closed")

    return lifespan


def _bind_settings(app: FastAPI, settings: Settings, engine: AsyncEngine) -> None:
    """Serve settings and database sessions of ``app`` from ``settings``."""
    session_maker = build_session_maker(engine)

    async def app_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_db_session] = app_db_session


def create_api_router() -> APIRouter:
    """Create the router carrying every resource endpoint."""
    api_router = APIRouter()
    api_router.include_router(
        auth_router,
        prefix="/auth",
        tags=["Authentication"],
    )
    api_router.include_router(
        tasks_router,
        prefix="/task",
        tags=["Tasks"],
    )
    api_router.include_router(
        users_router,
        prefix="/user",
        tags=["Users"],
    )
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override. The app then builds its own engine from
        them and serves them to every request instead of the global settings.

    Returns
    -------
    Configured FastAPI application instance.
    """
    bind_settings = settings is not None
    if settings is None:
        settings = get_settings()
        engine = get_engine()
    else:
        engine = build_engine(prepare_database_url(settings.database_url))

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="Multi-user **task tracking** with bearer token authentication.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=_build_lifespan(engine),
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if bind_settings:
        _bind_settings(app, settings, engine)

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Health"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "health": "/health",
        }

    return app
