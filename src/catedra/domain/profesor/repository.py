"""Profesor repository interface."""

from abc import ABC, abstractmethod

from catedra.domain.profesor.profesor import Profesor


class ProfesorRepository(ABC):
    """Store of profesor identity records.

    Emails are compared case-insensitively (see ``normalize_email``) and
    stored as supplied. Implementations must enforce email uniqueness
    themselves and raise ``EmailAlreadyInUseError`` from ``insert`` on a
    duplicate, and wrap any other storage failure in ``ProfesorStoreError``.
    """

    @abstractmethod
    async def find_by_email(self, correo: str) -> Profesor | None:
        """Find a profesor by their email address."""

    @abstractmethod
    async def insert(
        self,
        nombre: str,
        correo: str,
        contrasena_hash: str,
    ) -> Profesor:
        """Insert a new profesor and return it with its assigned id."""
