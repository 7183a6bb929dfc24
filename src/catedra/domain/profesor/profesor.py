"""Profesor identity record."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProfesorProfile:
    """Public view of a profesor, safe to return to callers."""

    id: int
    nombre: str
    correo: str


@dataclass(frozen=True)
class Profesor:
    """A registered profesor account.

    ``contrasena_hash`` is the bcrypt derivation of the credential; the
    plaintext is never held here.
    """

    id: int
    nombre: str
    correo: str
    contrasena_hash: str = field(repr=False)

    @property
    def profile(self) -> ProfesorProfile:
        return ProfesorProfile(id=self.id, nombre=self.nombre, correo=self.correo)


def normalize_email(correo: str) -> str:
    """Comparison key for an email; the stored address keeps its case."""
    return correo.lower()
