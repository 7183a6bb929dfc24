"""Authentication exceptions.

These exceptions are raised by the catedra_auth package and should be
caught and handled by the application layer (AuthenticationService) or
rendered by the API exception handlers.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Error de autenticación"):
        self.message = message
        super().__init__(self.message)


class CredentialValidationError(AuthError):
    """Raised when registration or login input is structurally invalid."""

    def __init__(self, message: str = "Datos de acceso inválidos"):
        super().__init__(message)


class MissingFieldError(CredentialValidationError):
    """Raised when a required field is absent or empty."""

    def __init__(
        self,
        message: str = "Todos los campos son requeridos",
        fields: tuple[str, ...] = (),
    ):
        self.fields = fields
        super().__init__(message)


class InvalidEmailFormatError(CredentialValidationError):
    """Raised when an email address does not match the accepted pattern."""

    def __init__(self, message: str = "Correo electrónico inválido"):
        super().__init__(message)


class WeakPasswordError(CredentialValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(
        self,
        message: str = "La contraseña debe tener al menos 8 caracteres",
    ):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Credenciales inválidas"):
        super().__init__(message)


class ProfesorNotFoundError(InvalidCredentialsError):
    """Raised when no account exists for the login email."""

    def __init__(self, message: str = "Profesor no encontrado"):
        super().__init__(message)


class IncorrectPasswordError(InvalidCredentialsError):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Contraseña incorrecta"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Token inválido"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a JWT token's expiry has passed."""

    def __init__(self, message: str = "Token expirado"):
        super().__init__(message)
