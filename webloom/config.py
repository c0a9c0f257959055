"""
config.py
---------
Runtime settings read from environment variables (and an optional .env file).

Database credentials fall back to local development defaults:
host ``localhost``, database ``webloom``, user/password ``postgres``, port 5432.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel
from sqlalchemy.engine import URL, make_url

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5500",
    "http://127.0.0.1:5500",
]


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _bool_env(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _list_env(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    pg_host: str = "localhost"
    pg_database: str = "webloom"
    pg_user: str = "postgres"
    pg_password: str = "postgres"
    pg_port: int = 5432
    database_url: str | None = None

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS

    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: int = 30
    db_echo: bool = False

    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        """DATABASE_URL if given, otherwise a PostgreSQL URL built from the PG_* values."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            "postgresql+psycopg2",
            username=self.pg_user,
            password=self.pg_password,
            host=self.pg_host,
            port=self.pg_port,
            database=self.pg_database,
        )
        return url.render_as_string(hide_password=False)

    def describe_database(self) -> dict:
        """Connection target for log output. Never includes the password."""
        if self.database_url:
            return {"url": make_url(self.database_url).render_as_string(hide_password=True)}
        return {
            "host": self.pg_host,
            "database": self.pg_database,
            "user": self.pg_user,
            "port": self.pg_port,
        }


def load_settings() -> Settings:
    """Builds settings from the current environment."""
    return Settings(
        pg_host=os.getenv("PG_HOST") or "localhost",
        pg_database=os.getenv("PG_DATABASE") or "webloom",
        pg_user=os.getenv("PG_USER") or "postgres",
        pg_password=os.getenv("PG_PASSWORD") or "postgres",
        pg_port=_int_env("PG_PORT", 5432),
        database_url=os.getenv("DATABASE_URL") or None,
        host=os.getenv("HOST") or "0.0.0.0",
        port=_int_env("PORT", 3000),
        cors_origins=_list_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        db_pool_size=_int_env("DB_POOL_SIZE", 10),
        db_max_overflow=_int_env("DB_MAX_OVERFLOW", 0),
        db_pool_timeout=_int_env("DB_POOL_TIMEOUT", 30),
        db_echo=_bool_env("DB_ECHO"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return load_settings()
