# scaffold/render.py
from __future__ import annotations
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from scaffold.documents import (
    ClassDocument,
    ColumnDefinition,
    ForeignKeyDefinition,
    Literal,
    MigrationDocument,
    Statement,
)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

def php_literal(value: Literal) -> str:
    """Python value -> PHP literal: 'text' (escaped), 5, 1.5, true, null."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"

def blueprint_call(statement: Statement) -> str:
    """One `$table->...` chain, without the trailing semicolon."""
    if isinstance(statement, ForeignKeyDefinition):
        call = (
            f"$table->foreign({php_literal(statement.column)})"
            f"->references({php_literal(statement.references)})"
            f"->on({php_literal(statement.on)})"
        )
        if statement.on_delete:
            call += f"->onDelete({php_literal(statement.on_delete)})"
        return call

    if isinstance(statement, ColumnDefinition):
        args = ", ".join(php_literal(a) for a in (statement.column, *statement.arguments))
        call = f"$table->{statement.method}({args})"
        for mod in statement.modifiers:
            call += f"->{mod.name}({', '.join(php_literal(a) for a in mod.arguments)})"
        return call

    raise TypeError(f"Unsupported migration statement: {statement!r}")

@lru_cache
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=()),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["php"] = php_literal
    env.filters["blueprint"] = blueprint_call
    return env

def render_class(document: ClassDocument) -> str:
    return _environment().get_template("model.php.j2").render(cls=document)

def render_migration(document: MigrationDocument) -> str:
    return _environment().get_template("migration.php.j2").render(migration=document)
