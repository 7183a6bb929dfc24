"""SQLAlchemy implementation for catedra persistence.

Provides:
- Base: Declarative base for models
- ProfesorModel: SQLAlchemy model for the profesor table
- ProfesorRepositorySQLAlchemy: Repository implementation for profesores
"""

from catedra.infrastructure.persistence.sqlalchemy.models import Base, ProfesorModel
from catedra.infrastructure.persistence.sqlalchemy.profesor_repository import (
    ProfesorRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "ProfesorModel",
    "ProfesorRepositorySQLAlchemy",
]
