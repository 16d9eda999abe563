from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Operator(str, Enum):
    LK = "LK"    # case-insensitive substring
    GT = "GT"
    GTE = "GTE"
    LTE = "LTE"


# ---------------------------------------------------------------------------
# Core filter models
# ---------------------------------------------------------------------------

@dataclass
class FilterExpression:
    """
    One condition of a predicate: a column, an operator, and a bound value.
    """
    property_name: str
    operator: Operator
    value: Any

    # camelCase JSON helpers
    def to_dict(self) -> Dict[str, Any]:
        return {
            "propertyName": self.property_name,
            "operator": self.operator.value,
            "value": self.value,
        }


@dataclass
class FilterCollection:
    """
    FilterExpressions that must all hold. Empty means "no filtering".
    """
    expressions: List[FilterExpression] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.expressions

    def to_dict(self) -> Dict[str, Any]:
        return {"expressions": [e.to_dict() for e in self.expressions]}


# ---------------------------------------------------------------------------
# Search model handed to the SELECT builder
# ---------------------------------------------------------------------------

@dataclass
class SearchModel:
    """
    What to select, from where, filtered and ordered how.
    """
    entity_name: str = ""
    columns: List[str] = field(default_factory=list)
    filter: FilterCollection = field(default_factory=FilterCollection)
    sort: List[str] = field(default_factory=list)


__all__ = [
    "Operator",
    "FilterExpression",
    "FilterCollection",
    "SearchModel",
]
