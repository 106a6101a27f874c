from scaffold.adapters.filesystem import DryRunFileWriter, LocalFileWriter, PlannedOperation
from scaffold.adapters.memory import MemoryFileWriter, StaticSchemaInspector
from scaffold.adapters.sqlalchemy_inspector import SqlAlchemySchemaInspector

__all__ = [
    "DryRunFileWriter",
    "LocalFileWriter",
    "PlannedOperation",
    "MemoryFileWriter",
    "StaticSchemaInspector",
    "SqlAlchemySchemaInspector",
]
