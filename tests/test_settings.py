from pathlib import Path

import pytest

from scaffold.generator import GeneratorConfig
from scaffold.settings import Settings, WritePolicy, create_db_engine, get_settings, sqlite_database_path

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        "LARAVEL_BASE_PATH", "MODEL_STRUCTURE_PATH", "MODELS_DIR", "MIGRATIONS_DIR",
        "MODELS_NAMESPACE", "DATABASE_URL", "LOG_LEVEL",
        "MODEL_WRITE_POLICY", "PIVOT_MODEL_WRITE_POLICY",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

def test_defaults_follow_laravel_layout(monkeypatch, tmp_path):
    monkeypatch.setenv("LARAVEL_BASE_PATH", str(tmp_path))
    s = Settings()
    assert s.STRUCTURE_PATH == tmp_path / "storage" / "app" / "model_structure.json"
    assert s.MODELS_DIR == tmp_path / "app" / "Models"
    assert s.MIGRATIONS_DIR == tmp_path / "database" / "migrations"
    assert s.MODELS_NAMESPACE == "App\\Models"
    assert s.DATABASE_URL == f"sqlite:///{tmp_path / 'database' / 'database.sqlite'}"
    assert s.MODEL_WRITE_POLICY is WritePolicy.OVERWRITE
    assert s.PIVOT_MODEL_WRITE_POLICY is WritePolicy.SKIP_EXISTING

def test_overrides(monkeypatch):
    monkeypatch.setenv("MODELS_DIR", "src/Domain")
    monkeypatch.setenv("MODEL_WRITE_POLICY", "skip-existing")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.MODELS_DIR == Path("src/Domain")
    assert s.MODEL_WRITE_POLICY is WritePolicy.SKIP_EXISTING
    assert s.LOG_LEVEL == "DEBUG"
    config = GeneratorConfig.from_settings(s)
    assert config.models_dir == Path("src/Domain")
    assert config.model_policy is WritePolicy.SKIP_EXISTING

def test_unknown_policy_is_rejected(monkeypatch):
    monkeypatch.setenv("PIVOT_MODEL_WRITE_POLICY", "merge")
    with pytest.raises(ValueError):
        Settings()

def test_sqlite_database_path(monkeypatch, tmp_path):
    monkeypatch.setenv("LARAVEL_BASE_PATH", str(tmp_path))
    assert sqlite_database_path(Settings()) == tmp_path / "database" / "database.sqlite"
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    assert sqlite_database_path(Settings()) is None
    monkeypatch.setenv("DATABASE_URL", "postgresql://app@localhost/app")
    assert sqlite_database_path(Settings()) is None

def test_read_only_engine_opens_sqlite_by_uri(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    engine = create_db_engine(Settings(), read_only=True)
    assert engine.url.database == f"file:{tmp_path / 'app.db'}"
    assert engine.url.query == {"mode": "ro", "uri": "true"}
    assert create_db_engine(Settings()).url.database == str(tmp_path / "app.db")
