# scaffold/pivot_emitter.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from model_structure.meta_models import RelationPair
from scaffold.documents import (
    ClassDocument,
    ColumnDefinition,
    ForeignKeyDefinition,
    MigrationAction,
    MigrationDocument,
)
from scaffold.model_emitter import DEFAULT_NAMESPACE
from scaffold.naming import plural, singular, snake, studly

ELOQUENT_PIVOT = "Illuminate\\Database\\Eloquent\\Relations\\Pivot"

@dataclass(frozen=True)
class PivotIdentity:
    """Canonical many-to-many join: sides are singular snake_case, sorted."""
    first: str
    second: str

    @classmethod
    def of(cls, pair: RelationPair) -> "PivotIdentity":
        a, b = sorted((snake(singular(pair.owner)), snake(singular(pair.related))))
        return cls(a, b)

    @property
    def sides(self) -> Tuple[str, str]:
        return (self.first, self.second)

    @property
    def table(self) -> str:
        return f"{self.first}_{self.second}"

    @property
    def class_name(self) -> str:
        return studly(self.table)

    @property
    def migration_name(self) -> str:
        return f"create_{self.table}_table"

    @property
    def foreign_keys(self) -> List[str]:
        return [f"{side}_id" for side in self.sides]

def unique_pivots(pairs: List[RelationPair]) -> List[PivotIdentity]:
    """Canonical identities in first-seen order; {A: B} and {B: A} collapse."""
    seen: Dict[PivotIdentity, None] = {}
    for pair in pairs:
        seen.setdefault(PivotIdentity.of(pair), None)
    return list(seen)

def pivot_migration(pivot: PivotIdentity) -> MigrationDocument:
    statements = [ColumnDefinition(fk, "unsignedBigInteger") for fk in pivot.foreign_keys]
    statements += [
        ForeignKeyDefinition(fk, on=plural(side), on_delete="cascade")
        for fk, side in zip(pivot.foreign_keys, pivot.sides)
    ]
    return MigrationDocument(
        name=pivot.migration_name,
        table=pivot.table,
        action=MigrationAction.CREATE,
        statements=statements,
        timestamps=False,
    )

def pivot_model(pivot: PivotIdentity, namespace: str = DEFAULT_NAMESPACE) -> ClassDocument:
    return ClassDocument(
        name=pivot.class_name,
        namespace=namespace,
        parent="Pivot",
        imports=[ELOQUENT_PIVOT],
        fillable=pivot.foreign_keys,
        table=pivot.table,
    )
