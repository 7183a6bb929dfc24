"""Shared domain building blocks."""

from catedra.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
)

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
]
