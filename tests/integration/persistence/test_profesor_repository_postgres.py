"""Tests for ProfesorRepositorySQLAlchemy on a real PostgreSQL container."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catedra.domain.profesor import EmailAlreadyInUseError
from catedra.infrastructure.persistence.sqlalchemy import ProfesorRepositorySQLAlchemy

# Import fixtures from shared database module
from tests.shared.fixtures.database import (  # noqa: F401
    pg_engine,
    pg_session,
    postgres_container,
)

pytestmark = pytest.mark.integration


async def test_insert_and_find(pg_session):
    repository = ProfesorRepositorySQLAlchemy(pg_session)

    ana = await repository.insert("Ana", "ana@test.com", "hash-a")
    found = await repository.find_by_email("ana@test.com")

    assert found == ana
    assert ana.id == 1


async def test_duplicate_email_raises(pg_session):
    repository = ProfesorRepositorySQLAlchemy(pg_session)
    await repository.insert("Ana", "ana@test.com", "hash-a")

    with pytest.raises(EmailAlreadyInUseError):
        await repository.insert("Otra", "ana@test.com", "hash-b")


async def test_concurrent_registrations_store_one_row(pg_session, pg_engine):
    session_maker = async_sessionmaker(
        pg_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def register(nombre: str) -> str:
        async with session_maker() as session:
            repository = ProfesorRepositorySQLAlchemy(session)
            try:
                await repository.insert(nombre, "ana@test.com", "hash")
                await session.commit()
            except EmailAlreadyInUseError:
                await session.rollback()
                return "duplicate"
            return "created"

    outcomes = await asyncio.gather(register("Ana"), register("Ana Dos"))

    assert sorted(outcomes) == ["created", "duplicate"]
    assert await ProfesorRepositorySQLAlchemy(pg_session).find_by_email(
        "ana@test.com"
    ) is not None
