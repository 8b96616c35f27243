"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (pilote asynchrone obligatoire : aiosqlite ou asyncpg)
    DATABASE_URL: str = "sqlite+aiosqlite:///./students.db"
    DATABASE_ECHO: bool = False
    # Crée les tables au démarrage (pas de migrations dans ce service)
    CREATE_TABLES: bool = True

    # Pagination de GET /students
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 1000
    MAX_PAGE: int = 1_000_000

    # Environnement
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
