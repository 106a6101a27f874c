# scaffold/relationships.py
from __future__ import annotations
from typing import List, Optional, Set, Tuple

from model_structure.meta_models import RelationKind, RelationPair, Relations
from scaffold.documents import RelationMethod
from scaffold.naming import camel, plural, studly

def _method_name(kind: RelationKind, related: str) -> str:
    """hasMany/belongsToMany -> plural (comments), belongsTo -> singular (author)."""
    if kind is RelationKind.BELONGS_TO:
        return camel(related)
    return camel(plural(related))

def related_model(kind: RelationKind, pair: RelationPair, model: str) -> Optional[str]:
    """
    The model on the other side of `pair` from `model`, or None if `model`
    does not own this relation. hasMany/belongsTo are directed (owner only);
    belongsToMany is undirected.
    """
    if pair.owner == model:
        return pair.related
    if kind is RelationKind.BELONGS_TO_MANY and pair.related == model:
        return pair.owner
    return None

def resolve_relations(model: str, relations: Relations) -> List[RelationMethod]:
    """
    Relation methods for `model`, in hasMany, belongsTo, belongsToMany order.
    Exact duplicates are dropped; a name already taken by a different relation
    gets a numeric suffix (comments -> comments2).
    """
    methods: List[RelationMethod] = []
    seen: Set[Tuple[str, RelationKind, str]] = set()
    used_names: Set[str] = set()

    for kind in (RelationKind.HAS_MANY, RelationKind.BELONGS_TO, RelationKind.BELONGS_TO_MANY):
        for pair in relations.of_kind(kind):
            related = related_model(kind, pair, model)
            if related is None:
                continue

            base_name = _method_name(kind, related)
            related_class = studly(related)
            key = (base_name, kind, related_class)
            if key in seen:
                continue
            seen.add(key)

            name = base_name
            i = 2
            while name in used_names:
                name = f"{base_name}{i}"
                i += 1
            used_names.add(name)

            methods.append(RelationMethod(name=name, kind=kind, related_class=related_class))
    return methods
