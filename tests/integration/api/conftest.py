"""Pytest fixtures for API integration tests.

Each test gets a fresh file-backed SQLite database. The app's session
dependency is overridden, so lifespan (which would connect to the
configured database) is never started.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from catedra.infrastructure.persistence.sqlalchemy.init_db import create_tables
from catedra.presentation.api.app import create_app
from catedra.presentation.api.dependencies import get_db_session
from catedra_config.settings import Settings
from tests.shared.fixtures import TestProfesorFactory


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'catedra.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        jwt_secret=TestProfesorFactory.JWT_SECRET,
        db_password="test-password",
        database_url_override=database_url,
        password_hash_rounds=4,  # Low rounds for fast tests
        api_debug=True,
    )


@pytest.fixture
def test_db_engine(database_url):
    """Create a SQLite database with the profesor table."""
    engine = create_async_engine(database_url, echo=False, poolclass=NullPool)
    asyncio.run(create_tables(engine))

    yield engine

    asyncio.run(engine.dispose())


def _build_client(settings: Settings, engine) -> TestClient:
    app = create_app(settings=settings)

    # Create a session maker that uses our test engine
    test_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return TestClient(app)


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client backed by the SQLite database."""
    return _build_client(api_settings, test_db_engine)


@pytest.fixture
def unified_client(api_settings, test_db_engine) -> TestClient:
    """Client whose login failures share one message."""
    settings = api_settings.model_copy(update={"auth_unified_login_errors": True})
    return _build_client(settings, test_db_engine)


@pytest.fixture
def registered_ana(test_client) -> dict:
    """Register Ana and return her profile."""
    response = test_client.post("/registrar-profesor", json=TestProfesorFactory.ana())
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(test_client, registered_ana) -> dict:
    """Get auth headers for Ana."""
    response = test_client.post(
        "/iniciar-sesion",
        json={
            "correo": TestProfesorFactory.ANA_CORREO,
            "contraseña": TestProfesorFactory.ANA_CONTRASENA,
        },
    )
    assert response.status_code == 200

    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
