# scaffold/adapters/filesystem.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

class LocalFileWriter:
    """FileWriter on the local disk. Parent directories are created on write."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def write(self, path: Path, content: str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def delete(self, path: Path) -> None:
        Path(path).unlink()

    def list_files(self, directory: Path) -> List[Path]:
        directory = Path(directory)
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.iterdir() if p.is_file())

@dataclass
class PlannedOperation:
    action: str  # "write" | "delete"
    path: Path

class DryRunFileWriter(LocalFileWriter):
    """
    Reads from disk but only records writes and deletes.
    Used by `from-json --dry-run` to print a plan without touching files.
    """
    def __init__(self) -> None:
        self.operations: List[PlannedOperation] = []

    def write(self, path: Path, content: str) -> None:
        logger.info("PLAN write %s (%d bytes)", path, len(content))
        self.operations.append(PlannedOperation("write", Path(path)))

    def delete(self, path: Path) -> None:
        logger.info("PLAN delete %s", path)
        self.operations.append(PlannedOperation("delete", Path(path)))
