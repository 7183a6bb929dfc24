"""API request/response schemas."""

from catedra.presentation.api.schemas.auth import (
    ErrorResponse,
    IniciarSesionRequest,
    IniciarSesionResponse,
    PerfilProfesor,
    PerfilResponse,
    ProfesorResponse,
    RegistrarProfesorRequest,
)

__all__ = [
    "ErrorResponse",
    "IniciarSesionRequest",
    "IniciarSesionResponse",
    "PerfilProfesor",
    "PerfilResponse",
    "ProfesorResponse",
    "RegistrarProfesorRequest",
]
