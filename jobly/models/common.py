from typing import Any, Dict, List, Optional

from ..database import MAX_INTEGER, paramstyle
from ..query import _ParamSink


def new_sink() -> _ParamSink:
    """Parameter sink in the connected driver's placeholder style."""
    return _ParamSink(paramstyle())


def first(rows: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    return rows[0] if rows else None


def storable_id(value: int) -> bool:
    """True when `value` fits an INTEGER key column; larger ids can never match a row."""
    return -MAX_INTEGER <= value <= MAX_INTEGER
