"""FastAPI application factory.

Creates and configures the FastAPI application with the users router,
middleware, and exception handlers. All endpoints live under ``/api``;
the health check stays at ``/health``.

Run with uvicorn in factory mode:

    uvicorn rede.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rede.presentation.api.dependencies import create_tables, get_engine
from rede.presentation.api.exception_handlers import setup_exception_handlers
from rede.presentation.api.routers import users_router
from rede_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for rede modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("rede").setLevel(log_level)
    logging.getLogger("rede_auth").setLevel(log_level)

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
        "name": "Users",
        "description": """Community account management.

**Identity keys:**
- `id` (UUID), `ign` (in-game name), `email`, `discord`
- `email`, `ign` and `discord` are unique; `ign` and `email` lookups ignore case

**Permissions:**
- 13 boolean flags, merged flag by flag on update
- New accounts control their own posts and comments only

**Roles:**
- `member`, `vip-hero`, `vip-legend`, `vip-supreme`, `partner`, `helper`,
  `moderator`, `moderator+`, `manager`, `manager+`, `master`
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Rede API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down Rede API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter()
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User accounts, roles and permissions for the community website.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "users": f"{API_PREFIX}/users",
            },
        }

    return app
