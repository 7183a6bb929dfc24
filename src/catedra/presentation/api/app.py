"""FastAPI application factory.

Creates and configures the FastAPI application with routers, middleware,
and exception handlers. Authentication routes are mounted at the root
(``/registrar-profesor``, ``/iniciar-sesion``, ``/perfil``).
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from catedra.infrastructure.persistence.sqlalchemy.init_db import create_tables
from catedra.presentation.api.dependencies import get_api_settings, get_engine
from catedra.presentation.api.exception_handlers import setup_exception_handlers
from catedra.presentation.api.routers import auth_router
from catedra_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Send catedra logs to stdout at LOG_LEVEL.

    Third-party loggers that chatter per request or per query are held
    at WARNING.
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("catedra").setLevel(log_level)
    logging.getLogger("catedra_auth").setLevel(log_level)
    logging.getLogger("catedra_config").setLevel(log_level)

    # Per-request and per-query chatter
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
ROOT_MESSAGE = "Servidor funcionando correctamente"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Profesor registration and session issuance.

**Security:**
- Passwords are hashed with bcrypt (cost 10 by default)
- Sessions are stateless HS256 JWTs that expire after one hour
""",
    },
    {
        "name": "Health",
        "description": "Liveness message and version.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup, release the pool on shutdown."""
    logger.info("Starting Catedra API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down Catedra API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Verify connectivity and create missing tables."""
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError, SQLAlchemyError):
        logger.critical("Could not connect to the database.", exc_info=True)
        raise SystemExit(1) from None

    logger.info("Database connection established")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When given, it replaces
        the cached settings for every request-scoped dependency.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    settings_override = settings
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Registration and login for profesor accounts.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    if settings_override is not None:
        app.dependency_overrides[get_api_settings] = lambda: settings_override

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(auth_router, tags=["Authentication"])

    @app.get("/", tags=["Health"], response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness message."""
        return ROOT_MESSAGE

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app


# Served by `catedra serve`
app = create_app()
