"""Authentication service for profesor registration and login."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from catedra.domain.profesor import (
    EmailAlreadyInUseError,
    ProfesorProfile,
)
from catedra_auth import (
    CredentialValidator,
    IncorrectPasswordError,
    JWTService,
    PasswordHashingService,
    ProfesorNotFoundError,
    TokenPayload,
)

if TYPE_CHECKING:
    from catedra.domain.profesor import ProfesorRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    token: str
    profesor: ProfesorProfile


class AuthenticationService:
    """
    Application service for profesor authentication.

    Orchestrates catedra_auth (validation, password hashing, JWT tokens)
    with the injected profesor store to provide:
    - Registration
    - Login with password
    - Token verification for protected routes

    Emails are kept as supplied; the repository compares them
    case-insensitively. Store failures propagate as ``ProfesorStoreError``;
    the caller owns the transaction and decides how to render them.
    """

    def __init__(
        self,
        profesor_repository: ProfesorRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        validator: CredentialValidator | None = None,
    ):
        self._profesor_repo = profesor_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._validator = validator or CredentialValidator()

    async def register(
        self,
        nombre: str | None,
        correo: str | None,
        contrasena: str | None,
    ) -> ProfesorProfile:
        self._validator.validate_registration(nombre, correo, contrasena)

        existing = await self._profesor_repo.find_by_email(correo)
        if existing is not None:
            raise EmailAlreadyInUseError(correo)

        # bcrypt is CPU-bound; keep it off the event loop
        contrasena_hash = await asyncio.to_thread(
            self._password_service.hash,
            contrasena,
        )
        profesor = await self._profesor_repo.insert(
            nombre=nombre,
            correo=correo,
            contrasena_hash=contrasena_hash,
        )

        logger.info("Profesor registered: %s (id=%s)", correo, profesor.id)
        return profesor.profile

    async def login(
        self,
        correo: str | None,
        contrasena: str | None,
    ) -> LoginResult:
        self._validator.validate_login(correo, contrasena)

        profesor = await self._profesor_repo.find_by_email(correo)
        if profesor is None:
            raise ProfesorNotFoundError

        is_valid = await asyncio.to_thread(
            self._password_service.verify,
            contrasena,
            profesor.contrasena_hash,
        )
        if not is_valid:
            raise IncorrectPasswordError

        token = self._jwt_service.create_access_token(
            profesor_id=profesor.id,
            nombre=profesor.nombre,
        )

        logger.info("Profesor logged in: %s (id=%s)", correo, profesor.id)
        return LoginResult(token=token, profesor=profesor.profile)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
