"""
Configuration de la connexion à la base de données.
Utilise SQLAlchemy avec un moteur asynchrone (aiosqlite en développement, asyncpg pour PostgreSQL).
"""

from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from students_api.config import settings

Base = declarative_base()


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite n'applique les clés étrangères que si le PRAGMA est activé sur chaque connexion."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    engine = create_async_engine(url, echo=settings.DATABASE_ECHO, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False : les objets restent lisibles après le commit (pas de lazy-load en async)
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = build_session_factory(engine)


async def init_models(target: AsyncEngine) -> None:
    """Crée les tables manquantes (students, courses, coursework)."""
    import students_api.models  # noqa: F401 : enregistre les modèles dans Base.metadata

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dépendance FastAPI : fournit une session BDD et la ferme après usage."""
    async with SessionLocal() as db:
        yield db


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Dépendance FastAPI : fournit la fabrique de sessions.
    Utilisée par les réponses en streaming, qui ouvrent leur propre session
    pour la durée du flux plutôt que pour celle de la requête.
    """
    return SessionLocal
