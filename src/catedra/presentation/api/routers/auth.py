"""Authentication router for profesor registration and login."""

import logging

from fastapi import APIRouter, HTTPException, status

from catedra.domain.profesor import EmailAlreadyInUseError
from catedra.presentation.api.dependencies import (
    AuthService,
    CurrentProfesor,
    DBSession,
    SettingsDep,
)
from catedra.presentation.api.schemas.auth import (
    ErrorResponse,
    IniciarSesionRequest,
    IniciarSesionResponse,
    PerfilProfesor,
    PerfilResponse,
    ProfesorResponse,
    RegistrarProfesorRequest,
)
from catedra_auth import CredentialValidationError, InvalidCredentialsError

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTRATION_FAILED_MESSAGE = "Error al registrar el profesor"
LOGIN_FAILED_MESSAGE = "Error al iniciar sesión"


@router.post(
    "/registrar-profesor",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new profesor",
    responses={
        201: {"description": "Profesor registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input or email in use"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)
async def registrar_profesor(
    request: RegistrarProfesorRequest,
    auth_service: AuthService,
    session: DBSession,
) -> ProfesorResponse:
    logger.info("Registration request for %s", request.correo)

    try:
        profesor = await auth_service.register(
            nombre=request.nombre,
            correo=request.correo,
            contrasena=request.contrasena,
        )
        await session.commit()

    except (CredentialValidationError, EmailAlreadyInUseError):
        await session.rollback()
        raise
    except Exception as e:
        await session.rollback()
        logger.exception("Registration failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=REGISTRATION_FAILED_MESSAGE,
        ) from e

    return ProfesorResponse.model_validate(profesor)


@router.post(
    "/iniciar-sesion",
    summary="Authenticate a profesor",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid input or credentials"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)
async def iniciar_sesion(
    request: IniciarSesionRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> IniciarSesionResponse:
    """
    Authenticate with email and password.

    Returns a signed session token valid for
    ``JWT_ACCESS_TOKEN_EXPIRE_HOURS`` hours.
    """
    logger.info("Login request for %s", request.correo)

    try:
        result = await auth_service.login(
            correo=request.correo,
            contrasena=request.contrasena,
        )

    except CredentialValidationError:
        raise
    except InvalidCredentialsError as e:
        logger.info("Login rejected for %s: %s", request.correo, type(e).__name__)
        if settings.auth_unified_login_errors:
            raise InvalidCredentialsError from e
        raise
    except Exception as e:
        logger.exception("Login failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=LOGIN_FAILED_MESSAGE,
        ) from e

    return IniciarSesionResponse(
        token=result.token,
        profesor=ProfesorResponse.model_validate(result.profesor),
    )


@router.get(
    "/perfil",
    summary="Current profesor from the session token",
    responses={
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
    },
)
async def perfil(current: CurrentProfesor) -> PerfilResponse:
    return PerfilResponse(
        profesor=PerfilProfesor(id=current.profesor_id, nombre=current.nombre),
    )
