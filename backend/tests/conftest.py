"""
Configuration partagée pour tous les tests.

- `client` : TestClient avec la BDD mockée (tests de contrat HTTP, services patchés).
- `api` : client HTTP asynchrone branché sur une vraie base SQLite temporaire (aiosqlite).
"""

from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport
from sqlalchemy.pool import NullPool

from students_api.database import build_engine, build_session_factory, get_db, get_session_factory, init_models
from students_api.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_session_factory] = lambda: MagicMock()
    # Pas de bloc `with` : le lifespan (création du schéma) n'est pas exécuté
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
async def session_factory(tmp_path):
    """Fabrique de sessions sur une base SQLite neuve, propre à chaque test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'students.db'}", poolclass=NullPool)
    await init_models(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
async def api(session_factory):
    """Client HTTP asynchrone sur l'application, branché sur la base temporaire."""

    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
