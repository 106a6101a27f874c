# scaffold/adapters/sqlalchemy_inspector.py
from __future__ import annotations
import logging
from typing import List

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

class SqlAlchemySchemaInspector:
    """
    SchemaInspector backed by SQLAlchemy reflection. A fresh Inspector is
    taken per call so tables created mid-run are visible.
    Errors (unreachable DB, missing driver) propagate to the caller.
    """
    def __init__(self, engine: Engine):
        self.engine = engine

    def has_table(self, table: str) -> bool:
        return sa_inspect(self.engine).has_table(table)

    def get_column_listing(self, table: str) -> List[str]:
        cols = [c["name"] for c in sa_inspect(self.engine).get_columns(table)]
        logger.debug("Live columns for %s: %s", table, cols)
        return cols
