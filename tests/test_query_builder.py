"""
Tests for query/builder.py - parameterized WHERE and SELECT generation.
"""

import pytest

from jobly.filters import (
    FilterCollection,
    FilterExpression,
    Operator,
    SearchModel,
    compose_company_search,
    compose_job_search,
    company_search_model,
    job_search_model,
)
from jobly.query import _ParamSink, build_select_from_search, build_where_clause_and_params


class TestParamSink:
    """Placeholders per paramstyle."""

    @pytest.mark.parametrize(
        "style,first,second",
        [("qmark", "?", "?"), ("format", "%s", "%s"), ("dollar", "$1", "$2"), ("pyformat", "%(p1)s", "%(p2)s")],
    )
    def test_placeholders(self, style, first, second):
        sink = _ParamSink(style)
        assert sink.add("a") == first
        assert sink.add("b") == second

    def test_unknown_paramstyle(self):
        with pytest.raises(ValueError):
            _ParamSink("named")


class TestWhereClause:
    """WHERE clause rendering."""

    def test_empty_collection_has_no_where(self):
        where, params = build_where_clause_and_params(FilterCollection())
        assert where == ""
        assert params == []

    def test_like_is_escaped_and_case_insensitive(self):
        fc = FilterCollection(expressions=[FilterExpression("name", Operator.LK, "50%_off")])
        where, params = build_where_clause_and_params(fc)

        assert where == "WHERE LOWER(name) LIKE LOWER(?) ESCAPE '\\'"
        assert params == ["%50\\%\\_off%"]

    def test_ilike(self):
        fc = FilterCollection(expressions=[FilterExpression("title", Operator.LK, "Eng")])
        where, params = build_where_clause_and_params(fc, paramstyle="dollar", use_ilike=True)

        assert where == "WHERE title ILIKE $1 ESCAPE '\\'"
        assert params == ["%Eng%"]

    def test_comparisons_keep_value_types(self):
        fc = FilterCollection(expressions=[
            FilterExpression("num_employees", Operator.GTE, 10),
            FilterExpression("num_employees", Operator.LTE, 2.5),
            FilterExpression("equity", Operator.GT, 0),
        ])
        where, params = build_where_clause_and_params(fc, paramstyle="format")

        assert where == "WHERE num_employees >= %s AND num_employees <= %s AND equity > %s"
        assert params == [10, 2.5, 0]

    def test_pyformat_params(self):
        fc = FilterCollection(expressions=[
            FilterExpression("title", Operator.LK, "a"),
            FilterExpression("salary", Operator.GTE, 5),
        ])
        where, params = build_where_clause_and_params(fc, paramstyle="pyformat")

        assert where == "WHERE LOWER(title) LIKE LOWER(%(p1)s) ESCAPE '\\' AND salary >= %(p2)s"
        assert params == {"p1": "%a%", "p2": 5}

    def test_continues_existing_sink(self):
        sink = _ParamSink("dollar")
        sink.add("first")
        fc = FilterCollection(expressions=[FilterExpression("salary", Operator.GT, 5)])

        where, params = build_where_clause_and_params(fc, sink=sink)

        assert where == "WHERE salary > $2"
        assert params == ["first", 5]

    def test_quoted_identifiers(self):
        fc = FilterCollection(expressions=[FilterExpression('we"ird', Operator.GT, 1)])
        where, _ = build_where_clause_and_params(fc, quote_identifiers=True)
        assert where == 'WHERE "we""ird" > ?'


class TestSelectFromSearch:
    """Full SELECT statements."""

    def test_requires_entity(self):
        with pytest.raises(ValueError):
            build_select_from_search(SearchModel())

    def test_unfiltered_company_listing(self):
        result = build_select_from_search(company_search_model(None))

        assert result.sql == (
            'SELECT handle, name, description, num_employees AS "numEmployees", '
            'logo_url AS "logoUrl" FROM companies ORDER BY name ASC'
        )
        assert result.params == []

    def test_filtered_company_listing(self):
        listing = compose_company_search({"name": "net", "minEmployees": 10})
        result = build_select_from_search(company_search_model(listing), paramstyle="dollar", use_ilike=True)

        assert "WHERE name ILIKE $1 ESCAPE '\\' AND num_employees >= $2" in result.sql
        assert result.sql.endswith("ORDER BY name ASC")
        assert result.params == ["%net%", 10]

    def test_filtered_job_listing(self):
        listing = compose_job_search({"minSalary": "100", "hasEquity": "true"})
        result = build_select_from_search(job_search_model(listing))

        assert result.sql == (
            'SELECT id, title, salary, equity, company_handle AS "companyHandle" '
            "FROM jobs WHERE salary >= ? AND equity > ? ORDER BY salary ASC"
        )
        assert result.params == [100, 0]

    def test_equity_false_only_has_no_where(self):
        listing = compose_job_search({"hasEquity": "false"})
        result = build_select_from_search(job_search_model(listing))

        assert "WHERE" not in result.sql
        assert result.sql.endswith("FROM jobs ORDER BY salary ASC")

    def test_no_columns_selects_everything(self):
        sm = SearchModel(entity_name="jobs")
        assert build_select_from_search(sm).sql == "SELECT * FROM jobs"
