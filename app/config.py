# app/config.py
"""
Runtime settings, read from the environment (and an optional .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DB_URL = "sqlite:///db.sqlite"  # file in project root


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DB_URL
    db_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 8010
    log_level: str = "INFO"


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


def _database_url_from_env() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    # Postgres credentials supplied piecemeal
    db_name = os.getenv("APP_DB_NAME")
    if not db_name:
        return DEFAULT_DB_URL

    user = os.getenv("APP_DB_USERNAME", "")
    password = os.getenv("APP_DB_PASSWORD", "")
    host = os.getenv("APP_DB_HOST", "localhost")
    port = os.getenv("APP_DB_PORT", "5432")
    auth = f"{user}:{password}@" if password else (f"{user}@" if user else "")
    return f"postgresql+psycopg2://{auth}{host}:{port}/{db_name}"


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        database_url=_database_url_from_env(),
        db_echo=_as_bool(os.getenv("DB_ECHO")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8010)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
