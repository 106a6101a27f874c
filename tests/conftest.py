import json
import random
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import pytest

from model_structure.loader import parse_structure
from scaffold.adapters import MemoryFileWriter, StaticSchemaInspector
from scaffold.generator import GeneratorConfig, SchemaGenerator

MODELS_DIR = Path("app/Models")
MIGRATIONS_DIR = Path("database/migrations")
NOW = datetime(2024, 1, 2, 3, 4, 5)
STAMP = "2024_01_02_030405"

@pytest.fixture
def writer():
    return MemoryFileWriter()

@pytest.fixture
def make_generator(writer):
    """make_generator(tables={"users": ["id", "name"]}, model_policy=...)"""
    def _make(tables=None, **config_overrides):
        config = replace(GeneratorConfig(models_dir=MODELS_DIR, migrations_dir=MIGRATIONS_DIR), **config_overrides)
        return SchemaGenerator(
            inspector=StaticSchemaInspector(tables),
            writer=writer,
            config=config,
            clock=lambda: NOW,
            rng=random.Random(7),
        )
    return _make

@pytest.fixture
def structure():
    def _structure(doc):
        return parse_structure(doc)
    return _structure

@pytest.fixture
def structure_file(tmp_path):
    def _write(doc, relative="storage/app/model_structure.json"):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(doc) if not isinstance(doc, str) else doc, encoding="utf-8")
        return path
    return _write
