"""Centralized exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses with a single
error body format.

Error Response Format:
    {
        "error": "Human-readable error message"
    }

Usage:
    from catedra.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catedra.domain.shared.exceptions import DomainException, ErrorCode
from catedra_auth.exceptions import (
    AuthError,
    CredentialValidationError,
    InvalidCredentialsError,
    InvalidTokenError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"
INVALID_REQUEST_MESSAGE = "Solicitud inválida"


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # Duplicate emails are reported as 400, not 409
    ErrorCode.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_IN_USE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception."""
    return ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)


def _create_error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle validation, login and token errors.

        Never logs request bodies; the credential must not reach the logs.
        """
        if isinstance(exc, InvalidTokenError):
            logger.info(
                "Rejected token on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
            )
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=exc.message,
                headers={"WWW-Authenticate": "Bearer"},
            )

        if isinstance(exc, (CredentialValidationError, InvalidCredentialsError)):
            logger.info(
                "%s on %s %s: %s",
                type(exc).__name__,
                request.method,
                request.url.path,
                exc.message,
            )
            return _create_error_response(
                status_code=status.HTTP_400_BAD_REQUEST,
                message=exc.message,
            )

        logger.warning(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=exc.message,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle domain exceptions with structured response.

        Server-side failures are logged with details and rendered with a
        generic message.
        """
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Domain failure on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
            return _create_error_response(
                status_code=status_code,
                message=INTERNAL_ERROR_MESSAGE,
            )

        logger.warning(
            "Domain exception on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
        )
        return _create_error_response(status_code=status_code, message=exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Render HTTPException details in the ``error`` body format."""
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Reject bodies that are not JSON objects of string fields."""
        logger.info(
            "Malformed request on %s %s: %d schema errors",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=INVALID_REQUEST_MESSAGE,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
        )
