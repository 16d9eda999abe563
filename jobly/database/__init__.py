"""
Database operations for the Jobly data service.

This module handles engine management, schema creation and query execution.
"""

from .engine import (
    execute_query,
    get_engine,
    paramstyle,
    reset_engine,
    uses_ilike,
)
from .schema import (
    MAX_INTEGER,
    init_schema,
    drop_schema,
)

__all__ = [
    "execute_query",
    "get_engine",
    "paramstyle",
    "reset_engine",
    "uses_ilike",
    "MAX_INTEGER",
    "init_schema",
    "drop_schema",
]
