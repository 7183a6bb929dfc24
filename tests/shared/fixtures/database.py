"""
Testcontainers-based PostgreSQL fixtures for integration tests.

Provides isolated, ephemeral Postgres instances for each test session.

Usage:
    # In your test file or conftest.py
    from tests.shared.fixtures.database import pg_session

    async def test_something(pg_session):
        repo = ProfesorRepositorySQLAlchemy(pg_session)
        await repo.insert("Ana", "ana@test.com", "hash")
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from catedra.infrastructure.persistence.sqlalchemy.models import Base

POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean database state via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def pg_engine(postgres_container):
    """
    Create an async SQLAlchemy engine connected to the test container.
    """
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    return create_async_engine(
        async_url,
        echo=False,
        poolclass=NullPool,  # Avoid connection pool issues in tests
    )


@pytest_asyncio.fixture(scope="function")
async def pg_session(pg_engine):
    """
    Provide an isolated database session for each test.

    Tables are dropped and recreated around every test.
    """
    async with pg_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        pg_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
        await session.rollback()

    async with pg_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
