"""
Query building module for the Jobly data service.

This module provides SQL generation from filter models and partial updates.
"""

from .builder import (
    build_where_clause_and_params,
    build_select_from_search,
    SelectBuildResult,
    _ParamSink,
)
from .partial_update import (
    Assignment,
    PartialUpdate,
    sql_for_partial_update,
)

__all__ = [
    "build_where_clause_and_params",
    "build_select_from_search",
    "SelectBuildResult",
    "_ParamSink",
    "Assignment",
    "PartialUpdate",
    "sql_for_partial_update",
]
