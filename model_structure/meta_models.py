# model_structure/meta_models.py
from __future__ import annotations
import re
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field, field_validator

FOREIGN_TYPE = "foreign"
DEFAULT_FIELD_TYPE = "string"

_PARAMETERIZED = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*\((.*)\)\s*$")
_INTEGER = re.compile(r"^[+-]?\d+$")

class RelationKind(str, Enum):
    HAS_MANY = "hasMany"
    BELONGS_TO = "belongsTo"
    BELONGS_TO_MANY = "belongsToMany"

def _type_argument(token: str) -> Union[int, str]:
    token = token.strip()
    return int(token) if _INTEGER.match(token) else token

class FieldDefinition(BaseModel):
    """
    One entry of a model's field list, e.g. "price:decimal(8,2)|nullable|default:0".
    `type` is the bare column method; parameters like (8,2) land in `type_arguments`.
    """
    name: str
    type: str = DEFAULT_FIELD_TYPE
    type_arguments: Tuple[Union[int, str], ...] = ()
    modifiers: List[str] = Field(default_factory=list)
    raw: str = ""

    @property
    def is_foreign(self) -> bool:
        return self.type == FOREIGN_TYPE

    @classmethod
    def parse(cls, raw: str) -> "FieldDefinition":
        name, sep, rest = raw.partition(":")
        if not sep:
            # bare name: no type given
            return cls(name=name.strip(), raw=raw)

        tokens = rest.split("|")
        type_token = tokens[0].strip() or DEFAULT_FIELD_TYPE
        modifiers = [t.strip() for t in tokens[1:] if t.strip()]

        arguments: Tuple[Union[int, str], ...] = ()
        m = _PARAMETERIZED.match(type_token)
        if m:
            type_token = m.group(1)
            arguments = tuple(_type_argument(a) for a in m.group(2).split(",") if a.strip())

        return cls(
            name=name.strip(),
            type=type_token,
            type_arguments=arguments,
            modifiers=modifiers,
            raw=raw,
        )

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("field name must not be empty")
        return v

class ModelDefinition(BaseModel):
    name: str
    fields: List[FieldDefinition] = Field(default_factory=list)

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    @field_validator("fields")
    @classmethod
    def _unique_field_names(cls, v: List[FieldDefinition]) -> List[FieldDefinition]:
        seen = set()
        for f in v:
            if f.name in seen:
                raise ValueError(f"duplicate field '{f.name}'")
            seen.add(f.name)
        return v

class RelationPair(BaseModel):
    owner: str
    related: str

    def involves(self, model: str) -> bool:
        return model in (self.owner, self.related)

class Relations(BaseModel):
    has_many: List[RelationPair] = Field(default_factory=list)
    belongs_to: List[RelationPair] = Field(default_factory=list)
    belongs_to_many: List[RelationPair] = Field(default_factory=list)

    def of_kind(self, kind: RelationKind) -> List[RelationPair]:
        if kind is RelationKind.HAS_MANY:
            return self.has_many
        if kind is RelationKind.BELONGS_TO:
            return self.belongs_to
        return self.belongs_to_many

def _pairs(entries: Optional[List[Dict[str, str]]]) -> List[RelationPair]:
    # {"Post": "Comment", "User": "Role"} reads as two pairs
    pairs: List[RelationPair] = []
    for entry in entries or []:
        for owner, related in entry.items():
            pairs.append(RelationPair(owner=owner, related=related))
    return pairs

class ModelStructure(BaseModel):
    models: List[ModelDefinition] = Field(default_factory=list)
    relations: Relations = Field(default_factory=Relations)

    @property
    def model_names(self) -> List[str]:
        return [m.name for m in self.models]

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "ModelStructure":
        """Build from the raw JSON document; missing or null sections are empty."""
        models = [
            ModelDefinition(
                name=name,
                fields=[FieldDefinition.parse(f) for f in (fields or [])],
            )
            for name, fields in (data.get("models") or {}).items()
        ]
        rel = data.get("relations") or {}
        relations = Relations(
            has_many=_pairs(rel.get(RelationKind.HAS_MANY.value)),
            belongs_to=_pairs(rel.get(RelationKind.BELONGS_TO.value)),
            belongs_to_many=_pairs(rel.get(RelationKind.BELONGS_TO_MANY.value)),
        )
        return cls(models=models, relations=relations)
