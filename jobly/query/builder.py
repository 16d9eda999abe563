"""
Parameterized SQL for listings.

Predicates arrive as a FilterCollection and are rendered with bound
parameters in the connected driver's placeholder style; values never
reach the SQL text.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
import re

from ..filters.models import FilterCollection, FilterExpression, Operator, SearchModel

_PLAIN_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

PARAMSTYLES = {"qmark", "format", "pyformat", "dollar"}

Params = Union[List[Any], Dict[str, Any]]

_COMPARISONS = {
    Operator.GT: ">",
    Operator.GTE: ">=",
    Operator.LTE: "<=",
}


def _quote_identifier(name: str, *, quote_identifiers: bool) -> str:
    """
    Leave plain names alone unless asked; otherwise wrap in double quotes,
    doubling any embedded quote.
    """
    if not quote_identifiers and _PLAIN_IDENT_RE.match(name):
        return name
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def _escape_like(value: str) -> str:
    r"""Escape \, % and _ so they match literally under ESCAPE '\'."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class _ParamSink:
    """
    Collects params and returns the correct placeholder per paramstyle.
      - 'qmark'    -> ?,      params is a list
      - 'format'   -> %s,     params is a list
      - 'dollar'   -> $1,     params is a list
      - 'pyformat' -> %(p1)s, params is a dict
    """
    def __init__(self, paramstyle: str = "qmark", *, prefix: str = "p"):
        if paramstyle not in PARAMSTYLES:
            raise ValueError(f"paramstyle must be one of {sorted(PARAMSTYLES)}")
        self.paramstyle = paramstyle
        self.prefix = prefix
        self.next_idx = 1
        self.params_list: List[Any] = []
        self.params_dict: Dict[str, Any] = {}

    def add(self, value: Any) -> str:
        idx = self.next_idx
        self.next_idx += 1
        if self.paramstyle == "pyformat":
            name = f"{self.prefix}{idx}"
            self.params_dict[name] = value
            return f"%({name})s"
        self.params_list.append(value)
        if self.paramstyle == "dollar":
            return f"${idx}"
        if self.paramstyle == "format":
            return "%s"
        return "?"

    def bundle(self) -> Params:
        return self.params_dict if self.paramstyle == "pyformat" else self.params_list


def _condition_sql(e: FilterExpression, sink: _ParamSink, *, use_ilike: bool, quote_identifiers: bool) -> str:
    col = _quote_identifier(e.property_name, quote_identifiers=quote_identifiers)

    if e.operator == Operator.LK:
        ph = sink.add(f"%{_escape_like(str(e.value))}%")
        if use_ilike:
            return f"{col} ILIKE {ph} ESCAPE '\\'"
        return f"LOWER({col}) LIKE LOWER({ph}) ESCAPE '\\'"

    symbol = _COMPARISONS.get(e.operator)
    if symbol is None:
        raise ValueError(f"Unsupported operator: {e.operator}")
    return f"{col} {symbol} {sink.add(e.value)}"


def build_where_clause_and_params(
    root: FilterCollection,
    *,
    paramstyle: str = "qmark",
    use_ilike: bool = False,
    quote_identifiers: bool = False,
    sink: Optional[_ParamSink] = None,
) -> Tuple[str, Params]:
    """
    Returns ('WHERE a AND b ...', params), or ('', params) for an empty
    collection. Pass `sink` to continue numbering after parameters already bound.
    """
    if sink is None:
        sink = _ParamSink(paramstyle)

    conditions = [
        _condition_sql(e, sink, use_ilike=use_ilike, quote_identifiers=quote_identifiers)
        for e in root.expressions
    ]
    if not conditions:
        return "", sink.bundle()
    return "WHERE " + " AND ".join(conditions), sink.bundle()

# -----------------------------------------------------------------------------
# SELECT builder
# -----------------------------------------------------------------------------

def _select_list(columns: Iterable[str], *, quote_identifiers: bool) -> str:
    """
    Column names are quoted as needed; anything with a space or parenthesis
    (``num_employees AS "numEmployees"``) is a trusted expression and passes through.
    """
    cols = [c.strip() for c in (columns or [])]
    if not cols:
        return "*"
    return ", ".join(
        c if any(tok in c for tok in (" ", "(", ")")) else _quote_identifier(c, quote_identifiers=quote_identifiers)
        for c in cols
    )


@dataclass
class SelectBuildResult:
    sql: str
    params: Params


def build_select_from_search(
    sm: SearchModel,
    *,
    paramstyle: str = "qmark",
    use_ilike: bool = False,
    quote_identifiers: bool = False,
) -> SelectBuildResult:
    """
    SELECT <columns> FROM <entity> [WHERE ...] [ORDER BY <sort> ASC, ...]
    """
    if not sm.entity_name:
        raise ValueError("SearchModel.entity_name is required")

    select_list = _select_list(sm.columns, quote_identifiers=quote_identifiers)
    from_name = _quote_identifier(sm.entity_name, quote_identifiers=quote_identifiers)
    where_clause, params = build_where_clause_and_params(
        sm.filter,
        paramstyle=paramstyle,
        use_ilike=use_ilike,
        quote_identifiers=quote_identifiers,
    )

    sql = f"SELECT {select_list} FROM {from_name}"
    if where_clause:
        sql += f" {where_clause}"
    if sm.sort:
        sql += " ORDER BY " + ", ".join(
            f"{_quote_identifier(s, quote_identifiers=quote_identifiers)} ASC" for s in sm.sort
        )
    return SelectBuildResult(sql=sql, params=params)


__all__ = [
    "build_where_clause_and_params",
    "build_select_from_search",
    "SelectBuildResult",
]
