"""SQLAlchemy implementation of ProfesorRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catedra.domain.profesor import (
    EmailAlreadyInUseError,
    Profesor,
    ProfesorRepository,
    ProfesorStoreError,
    normalize_email,
)
from catedra.infrastructure.persistence.sqlalchemy.models import ProfesorModel

logger = logging.getLogger(__name__)


class ProfesorRepositorySQLAlchemy(ProfesorRepository):
    """SQLAlchemy implementation of the ProfesorRepository interface.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, correo: str) -> Profesor | None:
        stmt = select(ProfesorModel).where(
            func.lower(ProfesorModel.correo) == normalize_email(correo)
        )
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise ProfesorStoreError(details={"operation": "find_by_email"}) from e

        if model is None:
            return None

        return self._map_to_domain(model)

    async def insert(
        self,
        nombre: str,
        correo: str,
        contrasena_hash: str,
    ) -> Profesor:
        model = ProfesorModel(
            nombre=nombre,
            correo=correo,
            contrasena_hash=contrasena_hash,
        )

        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower() or "duplicate" in str(e).lower():
                raise EmailAlreadyInUseError(correo) from e
            raise ProfesorStoreError(details={"operation": "insert"}) from e
        except (SQLAlchemyError, OSError) as e:
            raise ProfesorStoreError(details={"operation": "insert"}) from e

        logger.debug("Inserted profesor: %s", model.id)
        return self._map_to_domain(model)

    def _map_to_domain(self, model: ProfesorModel) -> Profesor:
        return Profesor(
            id=model.id,
            nombre=model.nombre,
            correo=model.correo,
            contrasena_hash=model.contrasena_hash,
        )
