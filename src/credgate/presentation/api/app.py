"""FastAPI application factory.

Creates and configures the FastAPI application with the auth router
and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from credgate import __version__
from credgate.presentation.api.dependencies import create_engine
from credgate.presentation.api.exception_handlers import setup_exception_handlers
from credgate.presentation.api.routers import auth_router
from credgate_auth import PasswordHashingService, TokenIssuer
from credgate_auth.persistence.sqlalchemy import AuthBase
from credgate_config.settings import Settings, get_settings

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"


def _configure_logging(log_level_str: str) -> None:
    """Send log records to stdout at the configured level.

    SQLAlchemy and aiosqlite stay at WARNING regardless of the level.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("credgate").setLevel(log_level)
    logging.getLogger("credgate_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting credgate API v%s...", API_VERSION)
    engine: AsyncEngine = app.state.engine
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down credgate API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create the credentials table if missing and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(AuthBase.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoint routers."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Signing configuration is validated here, so a bad key or issuer stops
    the process at startup instead of failing the first login.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.

    Raises
    ------
    SigningConfigurationError
        If the configured signing key or issuer is invalid
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    signing_context = settings.signing_context()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Username/password login issuing signed identity tokens.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    engine = create_engine(settings.database_url)
    app.state.settings = settings
    app.state.signing_context = signing_context
    password_service = PasswordHashingService(rounds=settings.password_hash_rounds)
    # Build the timing dummy hash now, not during the first failed login
    _ = password_service.dummy_hash
    app.state.password_service = password_service
    app.state.token_issuer = TokenIssuer(
        default_lifetime=signing_context.token_lifetime,
    )
    app.state.engine = engine
    app.state.session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app
