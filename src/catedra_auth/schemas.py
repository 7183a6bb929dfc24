"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    profesor_id
        The identifier of the authenticated profesor
    nombre
        The profesor's display name
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    profesor_id: int
    nombre: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token has expired."""
        now = now or datetime.now(tz=self.expires_at.tzinfo)
        return now > self.expires_at
