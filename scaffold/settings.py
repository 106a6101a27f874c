# scaffold/settings.py
from __future__ import annotations
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from dotenv import load_dotenv

load_dotenv()

class WritePolicy(str, Enum):
    OVERWRITE = "overwrite"          # last write wins, no merge
    SKIP_EXISTING = "skip-existing"  # only write when no file exists

class Settings:
    BASE_PATH: Path
    STRUCTURE_PATH: Path
    MODELS_DIR: Path
    MIGRATIONS_DIR: Path
    MODELS_NAMESPACE: str
    DATABASE_URL: str
    LOG_LEVEL: str
    MODEL_WRITE_POLICY: WritePolicy
    PIVOT_MODEL_WRITE_POLICY: WritePolicy

    def __init__(self) -> None:
        base = Path(os.getenv("LARAVEL_BASE_PATH", "."))
        self.BASE_PATH = base
        self.STRUCTURE_PATH = Path(os.getenv("MODEL_STRUCTURE_PATH", str(base / "storage" / "app" / "model_structure.json")))
        self.MODELS_DIR = Path(os.getenv("MODELS_DIR", str(base / "app" / "Models")))
        self.MIGRATIONS_DIR = Path(os.getenv("MIGRATIONS_DIR", str(base / "database" / "migrations")))
        self.MODELS_NAMESPACE = os.getenv("MODELS_NAMESPACE", "App\\Models")
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{base / 'database' / 'database.sqlite'}")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.MODEL_WRITE_POLICY = WritePolicy(os.getenv("MODEL_WRITE_POLICY", WritePolicy.OVERWRITE.value).lower())
        self.PIVOT_MODEL_WRITE_POLICY = WritePolicy(
            os.getenv("PIVOT_MODEL_WRITE_POLICY", WritePolicy.SKIP_EXISTING.value).lower()
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()

def sqlite_database_path(settings: Settings) -> Optional[Path]:
    """File behind a file-based SQLite URL, or None for other backends and :memory:."""
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return None
    return Path(url.database)

def create_db_engine(settings: Settings, read_only: bool = False) -> Engine:
    # no connection is opened until the schema is first inspected
    url = make_url(settings.DATABASE_URL)
    if read_only and sqlite_database_path(settings) is not None:
        # pysqlite otherwise creates the file on first connect
        url = url.set(database=f"file:{url.database}").update_query_dict({"mode": "ro", "uri": "true"})
    return create_engine(url, pool_pre_ping=True, future=True)
