# scaffold/adapters/memory.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

class StaticSchemaInspector:
    """
    SchemaInspector over a fixed {table: [columns]} map.
    With no tables it stands for an empty database (`from-json --no-db`).
    """
    def __init__(self, tables: Optional[Mapping[str, Iterable[str]]] = None):
        self.tables: Dict[str, List[str]] = {t: list(cols) for t, cols in (tables or {}).items()}

    def has_table(self, table: str) -> bool:
        return table in self.tables

    def get_column_listing(self, table: str) -> List[str]:
        return list(self.tables.get(table, []))

class MemoryFileWriter:
    """FileWriter keeping files in a dict keyed by path."""

    def __init__(self, files: Optional[Mapping[Path, str]] = None):
        self.files: Dict[Path, str] = {Path(p): c for p, c in (files or {}).items()}
        self.deleted: List[Path] = []

    def exists(self, path: Path) -> bool:
        return Path(path) in self.files

    def read(self, path: Path) -> str:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write(self, path: Path, content: str) -> None:
        self.files[Path(path)] = content

    def delete(self, path: Path) -> None:
        path = Path(path)
        if path not in self.files:
            raise FileNotFoundError(str(path))
        del self.files[path]
        self.deleted.append(path)

    def list_files(self, directory: Path) -> List[Path]:
        directory = Path(directory)
        return sorted(p for p in self.files if p.parent == directory)
