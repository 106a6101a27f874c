# scaffold/columns.py
from __future__ import annotations
import logging
import math
import re
from typing import List, Union

from model_structure.meta_models import FieldDefinition
from scaffold.documents import (
    ColumnDefinition,
    ColumnModifier,
    ForeignKeyDefinition,
    Statement,
)
from scaffold.naming import plural

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

DEFAULT_PREFIX = "default:"

def default_literal(value: str) -> Union[int, float, str]:
    """
    '5' -> 5, '1.5' -> 1.5, anything else stays a string (rendered quoted).
    """
    v = value.strip()
    if _NUMERIC.match(v):
        if re.match(r"^[+-]?\d+$", v):
            return int(v)
        number = float(v)
        if math.isfinite(number):
            return number
    return value

def foreign_table(field_name: str) -> str:
    """author_id -> authors"""
    base = field_name[:-3] if field_name.endswith("_id") and len(field_name) > 3 else field_name
    return plural(base)

def _modifiers(field: FieldDefinition) -> List[ColumnModifier]:
    mods: List[ColumnModifier] = []
    for raw in field.modifiers:
        if raw == "nullable":
            mods.append(ColumnModifier("nullable"))
        elif raw == "unique":
            mods.append(ColumnModifier("unique"))
        elif raw.startswith(DEFAULT_PREFIX):
            mods.append(ColumnModifier("default", (default_literal(raw[len(DEFAULT_PREFIX):]),)))
        else:
            logger.debug("Ignoring unknown modifier %r on field %s", raw, field.name)
    return mods

def column_statements(field: FieldDefinition) -> List[Statement]:
    """
    Translate one field into Blueprint statements:
      foreign        -> unsignedBigInteger + foreign()->references('id')->on(<table>)
      decimal(8,2)   -> decimal('<field>', 8, 2)
      <type>         -> <type>('<field>')
    Modifiers are applied in the order they were written.
    """
    if field.is_foreign:
        return [
            ColumnDefinition(field.name, "unsignedBigInteger", modifiers=_modifiers(field)),
            ForeignKeyDefinition(field.name, on=foreign_table(field.name)),
        ]

    return [
        ColumnDefinition(
            field.name,
            field.type,
            arguments=tuple(field.type_arguments),
            modifiers=_modifiers(field),
        )
    ]

def statements_for(fields: List[FieldDefinition]) -> List[Statement]:
    out: List[Statement] = []
    for f in fields:
        out.extend(column_statements(f))
    return out
