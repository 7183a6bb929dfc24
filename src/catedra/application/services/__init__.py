"""Application services."""

from catedra.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
)

__all__ = [
    "AuthenticationService",
    "LoginResult",
]
