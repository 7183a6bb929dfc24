"""Profesor identity domain."""

from catedra.domain.profesor.exceptions import (
    EmailAlreadyInUseError,
    ProfesorStoreError,
)
from catedra.domain.profesor.profesor import (
    Profesor,
    ProfesorProfile,
    normalize_email,
)
from catedra.domain.profesor.repository import ProfesorRepository

__all__ = [
    "EmailAlreadyInUseError",
    "Profesor",
    "ProfesorProfile",
    "ProfesorRepository",
    "ProfesorStoreError",
    "normalize_email",
]
