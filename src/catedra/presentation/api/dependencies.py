"""FastAPI dependency injection for the Catedra API.

Provides dependencies for:
- Settings
- Database sessions
- Service instances
- Authentication (current profesor from JWT)
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from catedra.application.services import AuthenticationService
from catedra.infrastructure.persistence.sqlalchemy import ProfesorRepositorySQLAlchemy
from catedra.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
)
from catedra_auth import JWTService, PasswordHashingService, TokenPayload
from catedra_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def get_api_settings() -> Settings:
    """Settings dependency (overridden by ``create_app(settings=...)``)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_engine_from_settings()


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_value,
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def get_auth_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService:
    """Build the authentication service bound to the request's session."""
    return AuthenticationService(
        profesor_repository=ProfesorRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_auth_service)]


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


async def get_current_profesor(
    jwt_service: JWTServiceDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenPayload:
    """
    Resolve the profesor from the Bearer token.

    Raises
    ------
    HTTPException
        401 when no Bearer token is sent
    InvalidTokenError
        When the token is invalid or expired (rendered as 401)
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token requerido",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return jwt_service.verify_token(credentials.credentials)


CurrentProfesor = Annotated[TokenPayload, Depends(get_current_profesor)]
