"""Catedra Auth - Credential and session issuance core.

This package provides authentication infrastructure that is independent
of the storage technology and of the HTTP layer. It handles:
- Credential input validation (presence, email shape, password length)
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    catedra_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── validators.py       # Input validation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from catedra_auth import CredentialValidator, JWTService, PasswordHashingService
"""

from catedra_auth.exceptions import (
    AuthError,
    CredentialValidationError,
    IncorrectPasswordError,
    InvalidCredentialsError,
    InvalidEmailFormatError,
    InvalidTokenError,
    MissingFieldError,
    ProfesorNotFoundError,
    TokenExpiredError,
    WeakPasswordError,
)
from catedra_auth.schemas import TokenPayload
from catedra_auth.services import JWTService, PasswordHashingService
from catedra_auth.validators import CredentialValidator

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    "CredentialValidator",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "CredentialValidationError",
    "MissingFieldError",
    "InvalidEmailFormatError",
    "WeakPasswordError",
    "InvalidCredentialsError",
    "ProfesorNotFoundError",
    "IncorrectPasswordError",
    "InvalidTokenError",
    "TokenExpiredError",
]
