# model_structure/loader.py
import json
from pathlib import Path
from jsonschema import ValidationError as SchemaValidationError
from jsonschema.validators import Draft7Validator
from pydantic import ValidationError

from model_structure.meta_models import ModelStructure

SCHEMA_PATH = Path(__file__).resolve().parent / "schema_definitions" / "model_structure.schema.json"

class InvalidStructureError(Exception):
    pass

def _reject_duplicate_keys(pairs):
    data = {}
    for key, value in pairs:
        if key in data:
            raise InvalidStructureError(f"Duplicate key '{key}' in model structure")
        data[key] = value
    return data

def _load_definition() -> dict:
    try:
        definition = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    except Exception as e:
        raise InvalidStructureError(f"Failed to read schema definition at {SCHEMA_PATH}: {e}") from e
    Draft7Validator.check_schema(definition)
    return definition

def parse_structure(data: dict) -> ModelStructure:
    """
    Validate an already-decoded document against the bundled JSON-Schema and
    build the typed structure. Missing sections default to empty.
    """
    try:
        Draft7Validator(_load_definition()).validate(data)
    except SchemaValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise InvalidStructureError(f"Model structure validation failed at {where}: {e.message}") from e

    try:
        return ModelStructure.from_document(data)
    except ValidationError as e:
        raise InvalidStructureError(f"Model structure validation failed: {e}") from e

def load_structure(path: str = "storage/app/model_structure.json") -> ModelStructure:
    structure_path = Path(path)
    if not structure_path.exists():
        raise InvalidStructureError(f"Model structure file not found at {path}")

    try:
        data = json.loads(
            structure_path.read_text(encoding="utf-8"),
            object_pairs_hook=_reject_duplicate_keys,
        )
    except json.JSONDecodeError as e:
        raise InvalidStructureError(f"Model structure at {path} is not valid JSON: {e}") from e

    return parse_structure(data)
