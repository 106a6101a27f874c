from model_structure.loader import InvalidStructureError, load_structure, parse_structure
from model_structure.meta_models import (
    FieldDefinition,
    ModelDefinition,
    ModelStructure,
    RelationKind,
    RelationPair,
    Relations,
)

__all__ = [
    "InvalidStructureError",
    "load_structure",
    "parse_structure",
    "FieldDefinition",
    "ModelDefinition",
    "ModelStructure",
    "RelationKind",
    "RelationPair",
    "Relations",
]
