"""Authentication schemas for request/response models.

Request fields are optional on purpose: absent or empty fields are
reported by the credential validator with the endpoint's own message
instead of a generic schema error.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegistrarProfesorRequest(BaseModel):
    """Request schema for profesor registration."""

    nombre: str | None = None
    correo: str | None = None
    contrasena: str | None = Field(default=None, alias="contraseña")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "nombre": "Ana",
                "correo": "ana@test.com",
                "contraseña": "secret123",
            },
        },
    )


class IniciarSesionRequest(BaseModel):
    """Request schema for profesor login."""

    correo: str | None = None
    contrasena: str | None = Field(default=None, alias="contraseña")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "correo": "ana@test.com",
                "contraseña": "secret123",
            },
        },
    )


class ProfesorResponse(BaseModel):
    """Public profesor data."""

    id: int
    nombre: str
    correo: str

    model_config = ConfigDict(from_attributes=True)


class IniciarSesionResponse(BaseModel):
    """Response schema for a successful login."""

    mensaje: str = "Inicio de sesión exitoso"
    token: str
    profesor: ProfesorResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "mensaje": "Inicio de sesión exitoso",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "profesor": {"id": 1, "nombre": "Ana", "correo": "ana@test.com"},
            },
        },
    )


class PerfilProfesor(BaseModel):
    """Identity claims carried by a session token."""

    id: int
    nombre: str


class PerfilResponse(BaseModel):
    """Response schema for the authenticated profile."""

    profesor: PerfilProfesor


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints."""

    error: str
