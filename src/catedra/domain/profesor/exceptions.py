"""Profesor domain exceptions."""

from typing import Any

from catedra.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
)


class EmailAlreadyInUseError(ConflictError):
    """Email already registered."""

    def __init__(self, correo: str) -> None:
        self.correo = correo
        super().__init__(
            "El correo ya está en uso",
            code=ErrorCode.EMAIL_ALREADY_IN_USE,
            details={"correo": correo},
        )


class ProfesorStoreError(DomainException):
    """The identity store failed to answer a lookup or insert."""

    def __init__(
        self,
        message: str = "Error de acceso a datos",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.STORE_ERROR, details=details)
