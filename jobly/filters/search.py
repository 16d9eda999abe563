"""
Listing filters for companies and jobs.

A listing request carries a handful of optional, loosely typed filters
(usually straight from the query string). The composers here turn them
into a structured predicate plus the shape of the listing to run, or
``None`` when nothing was asked for and the plain listing should be used.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Union
import math
import re

from jsonschema import Draft7Validator

from ..database import MAX_INTEGER
from ..errors import InvalidFilterError
from .models import FilterCollection, FilterExpression, Operator, SearchModel

Number = Union[int, float]

COMPANY_COLUMNS: Tuple[str, ...] = (
    "handle",
    "name",
    "description",
    'num_employees AS "numEmployees"',
    'logo_url AS "logoUrl"',
)
COMPANY_COLUMNS_WITHOUT_COUNT: Tuple[str, ...] = tuple(
    c for c in COMPANY_COLUMNS if not c.startswith("num_employees")
)
JOB_COLUMNS: Tuple[str, ...] = (
    "id",
    "title",
    "salary",
    "equity",
    'company_handle AS "companyHandle"',
)

# ---------------------------------------------------------------------------
# Query-string schemas
# ---------------------------------------------------------------------------

_SCALAR = {"type": ["string", "number"]}

COMPANY_SEARCH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Company search",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string"},
        "minEmployees": _SCALAR,
        "maxEmployees": _SCALAR,
    },
}

JOB_SEARCH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Job search",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": {"type": "string"},
        "minSalary": _SCALAR,
        "hasEquity": {"type": ["string", "boolean"]},
    },
}

# ---------------------------------------------------------------------------
# Filter specs
# ---------------------------------------------------------------------------

@dataclass
class CompanySearch:
    name: Any = None
    min_employees: Any = None
    max_employees: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompanySearch":
        return cls(
            name=data.get("name"),
            min_employees=data.get("minEmployees"),
            max_employees=data.get("maxEmployees"),
        )


@dataclass
class JobSearch:
    title: Any = None
    min_salary: Any = None
    has_equity: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JobSearch":
        return cls(
            title=data.get("title"),
            min_salary=data.get("minSalary"),
            has_equity=data.get("hasEquity"),
        )


# ---------------------------------------------------------------------------
# Listing shapes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CompanyListing:
    """Filtered company listing without the employee count column."""
    predicate: FilterCollection = field(default_factory=FilterCollection)
    columns: ClassVar[Tuple[str, ...]] = COMPANY_COLUMNS_WITHOUT_COUNT
    sort: ClassVar[Tuple[str, ...]] = ("name",)


@dataclass(frozen=True)
class CompanyListingWithCount:
    """Filtered company listing that also projects ``numEmployees``."""
    predicate: FilterCollection = field(default_factory=FilterCollection)
    columns: ClassVar[Tuple[str, ...]] = COMPANY_COLUMNS
    sort: ClassVar[Tuple[str, ...]] = ("name",)


@dataclass(frozen=True)
class JobListing:
    predicate: FilterCollection = field(default_factory=FilterCollection)
    columns: ClassVar[Tuple[str, ...]] = JOB_COLUMNS
    sort: ClassVar[Tuple[str, ...]] = ("salary",)


Listing = Union[CompanyListing, CompanyListingWithCount, JobListing]

# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def _present(value: Any) -> bool:
    return value is not None and value != ""


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _coerce_number(value: Any, field_name: str) -> Number:
    if isinstance(value, bool):
        raise InvalidFilterError(f"{field_name} must be a number, got {value!r}")
    if isinstance(value, (int, float, Decimal)):
        num = value
    else:
        text = str(value).strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidFilterError(f"{field_name} must be a number, got {value!r}")
        num = int(text) if text.lstrip("+-").isdigit() else float(text)
    if isinstance(num, Decimal):
        num = float(num)
    if isinstance(num, float) and not math.isfinite(num):
        raise InvalidFilterError(f"{field_name} must be a finite number, got {value!r}")
    if abs(num) > MAX_INTEGER:
        raise InvalidFilterError(f"{field_name} is out of range, got {value!r}")
    return num


def _coerce_count(value: Any, field_name: str) -> Number:
    num = _coerce_number(value, field_name)
    if num < 0:
        raise InvalidFilterError(f"{field_name} cannot be negative, got {value!r}")
    return num


def _coerce_flag(value: Any) -> bool:
    # only a literal "true" turns the flag on; nothing here raises
    return value is True or value == "true"


def _contains(column: str, text: Any) -> FilterExpression:
    return FilterExpression(property_name=column, operator=Operator.LK, value=str(text))

# ---------------------------------------------------------------------------
# Composers
# ---------------------------------------------------------------------------

def compose_company_search(
    spec: Union[CompanySearch, Mapping[str, Any], None],
) -> Optional[Union[CompanyListing, CompanyListingWithCount]]:
    """
    Conditions, in order: name (case-insensitive substring), minEmployees
    (inclusive), maxEmployees (inclusive), all AND-ed.

    The employee count column is only projected when one of the employee
    bounds was given. Returns None when no filter was given at all.
    """
    if spec is None:
        return None
    if not isinstance(spec, CompanySearch):
        spec = CompanySearch.from_dict(spec)

    has_name = _present(spec.name)
    has_min = _present(spec.min_employees)
    has_max = _present(spec.max_employees)
    if not (has_name or has_min or has_max):
        return None

    expressions: List[FilterExpression] = []
    if has_name:
        expressions.append(_contains("name", spec.name))

    min_employees = max_employees = None
    if has_min:
        min_employees = _coerce_count(spec.min_employees, "minEmployees")
        expressions.append(FilterExpression("num_employees", Operator.GTE, min_employees))
    if has_max:
        max_employees = _coerce_count(spec.max_employees, "maxEmployees")
        expressions.append(FilterExpression("num_employees", Operator.LTE, max_employees))
    if has_min and has_max and min_employees > max_employees:
        raise InvalidFilterError("minEmployees cannot be greater than maxEmployees")

    predicate = FilterCollection(expressions=expressions)
    if has_min or has_max:
        return CompanyListingWithCount(predicate=predicate)
    return CompanyListing(predicate=predicate)


def compose_job_search(spec: Union[JobSearch, Mapping[str, Any], None]) -> Optional[JobListing]:
    """
    Conditions, in order: title (case-insensitive substring), minSalary
    (inclusive, coerced to a number), hasEquity (``equity > 0`` when true,
    nothing when false), all AND-ed.

    Returns None when no filter was given at all.
    """
    if spec is None:
        return None
    if not isinstance(spec, JobSearch):
        spec = JobSearch.from_dict(spec)

    has_title = _present(spec.title)
    has_salary = _present(spec.min_salary)
    has_equity_flag = _present(spec.has_equity)
    if not (has_title or has_salary or has_equity_flag):
        return None

    expressions: List[FilterExpression] = []
    if has_title:
        expressions.append(_contains("title", spec.title))
    if has_salary:
        min_salary = _coerce_number(spec.min_salary, "minSalary")
        expressions.append(FilterExpression("salary", Operator.GTE, min_salary))
    if has_equity_flag and _coerce_flag(spec.has_equity):
        expressions.append(FilterExpression("equity", Operator.GT, 0))

    return JobListing(predicate=FilterCollection(expressions=expressions))

# ---------------------------------------------------------------------------
# Query-string parsing and SearchModel conversion
# ---------------------------------------------------------------------------

def _validate_query(params: Mapping[str, Any], schema: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(params or {})
    errors = sorted(Draft7Validator(schema).iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise InvalidFilterError("; ".join(e.message for e in errors))
    return data


def parse_company_search(params: Mapping[str, Any]) -> CompanySearch:
    """
    Validate raw listing parameters (unknown keys are rejected) and build a CompanySearch.
    """
    return CompanySearch.from_dict(_validate_query(params, COMPANY_SEARCH_SCHEMA))


def parse_job_search(params: Mapping[str, Any]) -> JobSearch:
    return JobSearch.from_dict(_validate_query(params, JOB_SEARCH_SCHEMA))


def company_search_model(listing: Optional[Union[CompanyListing, CompanyListingWithCount]]) -> SearchModel:
    if listing is None:
        return SearchModel(entity_name="companies", columns=list(COMPANY_COLUMNS), sort=["name"])
    return SearchModel(
        entity_name="companies",
        columns=list(listing.columns),
        filter=listing.predicate,
        sort=list(listing.sort),
    )


def job_search_model(listing: Optional[JobListing]) -> SearchModel:
    if listing is None:
        return SearchModel(entity_name="jobs", columns=list(JOB_COLUMNS), sort=["salary"])
    return SearchModel(
        entity_name="jobs",
        columns=list(listing.columns),
        filter=listing.predicate,
        sort=list(listing.sort),
    )


__all__ = [
    "CompanySearch",
    "JobSearch",
    "CompanyListing",
    "CompanyListingWithCount",
    "JobListing",
    "COMPANY_COLUMNS",
    "COMPANY_COLUMNS_WITHOUT_COUNT",
    "JOB_COLUMNS",
    "COMPANY_SEARCH_SCHEMA",
    "JOB_SEARCH_SCHEMA",
    "compose_company_search",
    "compose_job_search",
    "parse_company_search",
    "parse_job_search",
    "company_search_model",
    "job_search_model",
]
