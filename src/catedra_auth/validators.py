"""Structural validation of registration and login input.

Checks run before any store access or hashing. The first failing rule
wins, in this order: presence, email format (whole string), minimum
length in UTF-16 code units, bcrypt input limit. Login only checks
presence; stored accounts already passed the remaining rules when they
registered.
"""

import re

from catedra_auth.exceptions import (
    InvalidEmailFormatError,
    MissingFieldError,
    WeakPasswordError,
)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")

REGISTRATION_MISSING_MESSAGE = "Todos los campos son requeridos"
LOGIN_MISSING_MESSAGE = "Correo y contraseña son requeridos"


def _missing(**fields: str | None) -> tuple[str, ...]:
    return tuple(name for name, value in fields.items() if not value)


def _utf16_length(value: str) -> int:
    # Characters outside the BMP count twice, as in browser-side checks
    return len(value.encode("utf-16-le")) // 2


class CredentialValidator:
    """Validates raw credential input.

    Examples
    --------
    >>> validator = CredentialValidator()
    >>> validator.validate_registration("Ana", "ana@test.com", "secret123")
    >>> validator.validate_registration("Ana", "not-an-email", "secret123")
    Traceback (most recent call last):
        ...
    catedra_auth.exceptions.InvalidEmailFormatError: Correo electrónico inválido
    """

    MIN_PASSWORD_LENGTH = 8
    # bcrypt only consumes the first 72 bytes of its input
    MAX_PASSWORD_BYTES = 72

    def validate_registration(
        self,
        nombre: str | None,
        correo: str | None,
        contrasena: str | None,
    ) -> None:
        """Validate a registration request.

        Raises
        ------
        MissingFieldError
            If any of the three fields is absent or empty
        InvalidEmailFormatError
            If the email does not match ``EMAIL_PATTERN``
        WeakPasswordError
            If the password is shorter than ``MIN_PASSWORD_LENGTH``
            characters or longer than ``MAX_PASSWORD_BYTES`` bytes
        """
        missing = _missing(nombre=nombre, correo=correo, contrasena=contrasena)
        if missing:
            raise MissingFieldError(REGISTRATION_MISSING_MESSAGE, fields=missing)

        if not EMAIL_PATTERN.fullmatch(correo):
            raise InvalidEmailFormatError

        self.validate_password_strength(contrasena)

    def validate_login(self, correo: str | None, contrasena: str | None) -> None:
        """Validate a login request (presence only)."""
        missing = _missing(correo=correo, contrasena=contrasena)
        if missing:
            raise MissingFieldError(LOGIN_MISSING_MESSAGE, fields=missing)

    def validate_password_strength(self, contrasena: str) -> None:
        if _utf16_length(contrasena) < self.MIN_PASSWORD_LENGTH:
            msg = (
                "La contraseña debe tener al menos "
                f"{self.MIN_PASSWORD_LENGTH} caracteres"
            )
            raise WeakPasswordError(msg)

        if len(contrasena.encode("utf-8")) > self.MAX_PASSWORD_BYTES:
            msg = f"La contraseña no puede superar los {self.MAX_PASSWORD_BYTES} bytes"
            raise WeakPasswordError(msg)
