"""JWT token service.

Provides session token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone

import jwt

from catedra_auth.exceptions import InvalidTokenError, TokenExpiredError
from catedra_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are signed with a symmetric secret (HS256) and carry the
    profesor id and display name. The server keeps no record of issued
    tokens.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(1, "Ana")
    >>> payload = service.verify_token(token)
    >>> print(payload.profesor_id)
    1
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until an access token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        profesor_id: int,
        nombre: str,
        expires_delta: timedelta | None = None,
        issued_at: datetime | None = None,
    ) -> str:
        """Create a signed session token.

        Parameters
        ----------
        profesor_id
            The profesor's unique identifier
        nombre
            The profesor's display name
        expires_delta
            Custom expiration time (optional)
        issued_at
            Issue timestamp (optional, defaults to now in UTC)

        Returns
        -------
        The encoded JWT token string
        """
        now = issued_at or datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(profesor_id),
            "profesorId": profesor_id,
            "nombre": nombre,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the token's expiry has passed
        InvalidTokenError
            If the token is invalid, tampered with, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat", "sub"]},
            )

            return TokenPayload(
                profesor_id=int(payload["profesorId"]),
                nombre=payload["nombre"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError from e
