# scaffold/documents.py
"""
Intermediate documents built by the emitters and consumed by scaffold.render.

Emitters decide *what* a model class or migration contains; the formatter
decides how it reads as PHP. Tests assert on these structures directly.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from model_structure.meta_models import RelationKind

Literal = Union[int, float, str, bool, None]

# ---- model classes -----------------------------------------------------------

@dataclass
class RelationMethod:
    name: str
    kind: RelationKind
    related_class: str

@dataclass
class ClassDocument:
    name: str
    namespace: str
    parent: str  # short name, imported via `imports`
    imports: List[str] = field(default_factory=list)
    fillable: List[str] = field(default_factory=list)
    methods: List[RelationMethod] = field(default_factory=list)
    table: Optional[str] = None

    @property
    def filename(self) -> str:
        return f"{self.name}.php"

# ---- migrations --------------------------------------------------------------

class MigrationAction(str, Enum):
    CREATE = "create"
    ADD = "add"

@dataclass
class ColumnModifier:
    name: str
    arguments: Tuple[Literal, ...] = ()

@dataclass
class ColumnDefinition:
    column: str
    method: str
    arguments: Tuple[Literal, ...] = ()
    modifiers: List[ColumnModifier] = field(default_factory=list)

    def modifier_names(self) -> List[str]:
        return [m.name for m in self.modifiers]

@dataclass
class ForeignKeyDefinition:
    column: str
    on: str
    references: str = "id"
    on_delete: Optional[str] = None

Statement = Union[ColumnDefinition, ForeignKeyDefinition]

@dataclass
class MigrationDocument:
    name: str
    table: str
    action: MigrationAction
    statements: List[Statement] = field(default_factory=list)
    with_id: bool = True
    timestamps: bool = True

    @property
    def columns(self) -> List[ColumnDefinition]:
        return [s for s in self.statements if isinstance(s, ColumnDefinition)]

    @property
    def foreign_keys(self) -> List[ForeignKeyDefinition]:
        return [s for s in self.statements if isinstance(s, ForeignKeyDefinition)]

    @property
    def column_names(self) -> List[str]:
        return [c.column for c in self.columns]

    def column(self, name: str) -> Optional[ColumnDefinition]:
        for c in self.columns:
            if c.column == name:
                return c
        return None

    def filename(self, timestamp: str) -> str:
        return f"{timestamp}_{self.name}.php"
