# scaffold/ports.py
from __future__ import annotations
from pathlib import Path
from typing import List, Protocol

class SchemaInspector(Protocol):
    """Read-only view of the live database schema."""
    def has_table(self, table: str) -> bool: ...
    def get_column_listing(self, table: str) -> List[str]: ...

class FileWriter(Protocol):
    """
    File-system capability used for generated artifacts.
    `list_files` returns the files directly inside `directory` (empty if it
    does not exist).
    """
    def exists(self, path: Path) -> bool: ...
    def write(self, path: Path, content: str) -> None: ...
    def delete(self, path: Path) -> None: ...
    def list_files(self, directory: Path) -> List[Path]: ...
