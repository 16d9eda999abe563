from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..errors import InvalidInputError
from .builder import _ParamSink, _quote_identifier


@dataclass(frozen=True)
class Assignment:
    """
    One ``column = $index`` pair of an UPDATE's SET list. ``index`` is 1-based.
    """
    column: str
    index: int

    def to_sql(self, placeholder: Optional[str] = None) -> str:
        col = _quote_identifier(self.column, quote_identifiers=True)
        return f"{col}={placeholder or f'${self.index}'}"


@dataclass
class PartialUpdate:
    assignments: List[Assignment] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)

    @property
    def set_cols(self) -> str:
        """
        SET list with positional ``$n`` placeholders, e.g. '"first_name"=$1, "age"=$2'.
        """
        return ", ".join(a.to_sql() for a in self.assignments)

    def render(self, sink: _ParamSink) -> str:
        """
        Bind the values into `sink` and return the SET list in its paramstyle.

        The sink should be fresh so its numbering lines up with the
        assignment indexes; anything added afterwards (the row key) is
        numbered from ``len(values) + 1``.
        """
        return ", ".join(a.to_sql(sink.add(v)) for a, v in zip(self.assignments, self.values))


def sql_for_partial_update(data: Mapping[str, Any], js_to_sql: Optional[Mapping[str, str]] = None) -> PartialUpdate:
    """
    Turn a sparse field map into the SET list of an UPDATE.

    Keys are looked up in `js_to_sql` for the physical column name and fall
    back to the key itself. Placeholder positions follow the iteration order
    of `data`, and ``values[i - 1]`` is what placeholder ``i`` binds.

        {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
          => '"first_name"=$1, "age"=$2', ["Aliya", 32]

    Raises InvalidInputError when `data` is empty.
    """
    if not data:
        raise InvalidInputError("No data to update")

    js_to_sql = js_to_sql or {}
    keys = list(data.keys())
    assignments = [
        Assignment(column=js_to_sql.get(key, key), index=idx)
        for idx, key in enumerate(keys, start=1)
    ]
    values = [data[key] for key in keys]
    return PartialUpdate(assignments=assignments, values=values)


__all__ = [
    "Assignment",
    "PartialUpdate",
    "sql_for_partial_update",
]
