"""SQLAlchemy models."""

from sqlalchemy import Index, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class ProfesorModel(Base):
    """SQLAlchemy model for persisting profesor identity records.

    ``correo`` keeps the address as typed. The unique index on
    ``lower(correo)`` is what actually guarantees one account per email;
    the application-level lookup is only a fast path.
    """

    __tablename__ = "profesor"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    correo: Mapped[str] = mapped_column(String(255), nullable=False)
    contrasena_hash: Mapped[str] = mapped_column(
        "contraseña",
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ProfesorModel(id={self.id}, correo={self.correo})>"


Index(
    "uq_profesor_correo_lower",
    func.lower(ProfesorModel.correo),
    unique=True,
)
