# scaffold/migration_emitter.py
from __future__ import annotations
import logging
from typing import List, Optional

from model_structure.meta_models import FieldDefinition, ModelDefinition
from scaffold.columns import statements_for
from scaffold.documents import MigrationAction, MigrationDocument
from scaffold.naming import table_name
from scaffold.ports import SchemaInspector

logger = logging.getLogger(__name__)

def migration_name(action: MigrationAction, table: str, fields: List[FieldDefinition]) -> str:
    if action is MigrationAction.CREATE:
        return f"create_{table}_table"
    return f"add_{'_'.join(f.name for f in fields)}_to_{table}_table"

def missing_fields(model: ModelDefinition, live_columns: List[str]) -> List[FieldDefinition]:
    """
    Declared fields whose column is not in the live table, in declared order.
    Additive only: extra live columns and type differences are ignored.
    """
    live = set(live_columns)
    return [f for f in model.fields if f.name not in live]

def create_migration(table: str, fields: List[FieldDefinition]) -> MigrationDocument:
    return MigrationDocument(
        name=migration_name(MigrationAction.CREATE, table, fields),
        table=table,
        action=MigrationAction.CREATE,
        statements=statements_for(fields),
    )

def add_migration(table: str, fields: List[FieldDefinition]) -> MigrationDocument:
    return MigrationDocument(
        name=migration_name(MigrationAction.ADD, table, fields),
        table=table,
        action=MigrationAction.ADD,
        statements=statements_for(fields),
        with_id=False,
        timestamps=False,
    )

def plan_migration(model: ModelDefinition, inspector: SchemaInspector) -> Optional[MigrationDocument]:
    """
    Missing table -> create migration with every field.
    Existing table -> add migration with the fields not yet present, or None.
    """
    table = table_name(model.name)
    if not inspector.has_table(table):
        logger.info("Table %s does not exist; planning create", table)
        return create_migration(table, model.fields)

    new_fields = missing_fields(model, inspector.get_column_listing(table))
    if not new_fields:
        logger.info("Table %s is up to date", table)
        return None

    logger.info("Table %s is missing columns: %s", table, ", ".join(f.name for f in new_fields))
    return add_migration(table, new_fields)
