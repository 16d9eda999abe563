"""
Tests for filters/search.py - company and job listing filters.
"""

import pytest

from jobly.errors import InvalidFilterError
from jobly.filters import (
    CompanyListing,
    CompanyListingWithCount,
    CompanySearch,
    FilterExpression,
    JobListing,
    JobSearch,
    Operator,
    company_search_model,
    compose_company_search,
    compose_job_search,
    job_search_model,
    parse_company_search,
    parse_job_search,
)


def _exprs(listing):
    return [(e.property_name, e.operator, e.value) for e in listing.predicate.expressions]


class TestComposeCompanySearch:
    """Company filter composition."""

    @pytest.mark.parametrize("spec", [None, {}, CompanySearch(), {"name": ""}, {"minEmployees": None}])
    def test_no_filters(self, spec):
        assert compose_company_search(spec) is None

    def test_name_only_drops_count_column(self):
        listing = compose_company_search({"name": "net"})

        assert isinstance(listing, CompanyListing)
        assert _exprs(listing) == [("name", Operator.LK, "net")]
        assert 'num_employees AS "numEmployees"' not in listing.columns

    def test_bounds_project_count_column(self):
        listing = compose_company_search({"minEmployees": "10", "maxEmployees": 500})

        assert isinstance(listing, CompanyListingWithCount)
        assert _exprs(listing) == [
            ("num_employees", Operator.GTE, 10),
            ("num_employees", Operator.LTE, 500),
        ]
        assert 'num_employees AS "numEmployees"' in listing.columns

    def test_all_three_in_order(self):
        listing = compose_company_search(CompanySearch(name="Net", min_employees=1, max_employees=2))
        assert [e[0] for e in _exprs(listing)] == ["name", "num_employees", "num_employees"]
        assert [e[1] for e in _exprs(listing)] == [Operator.LK, Operator.GTE, Operator.LTE]

    def test_max_only(self):
        listing = compose_company_search({"maxEmployees": "3"})
        assert isinstance(listing, CompanyListingWithCount)
        assert _exprs(listing) == [("num_employees", Operator.LTE, 3)]

    def test_float_bound_kept(self):
        listing = compose_company_search({"minEmployees": "2.5"})
        assert _exprs(listing) == [("num_employees", Operator.GTE, 2.5)]

    @pytest.mark.parametrize("bad", ["abc", "nan", "inf", True, "1_000", "\u0661\u0662", "0x10", "1e", "."])
    def test_non_numeric_bound_raises(self, bad):
        with pytest.raises(InvalidFilterError):
            compose_company_search({"minEmployees": bad})

    @pytest.mark.parametrize("text,expected", [("+7", 7), (" 12 ", 12), ("1e3", 1000.0), (".5", 0.5)])
    def test_plain_decimal_text_accepted(self, text, expected):
        listing = compose_company_search({"minEmployees": text})
        assert _exprs(listing) == [("num_employees", Operator.GTE, expected)]

    @pytest.mark.parametrize("huge", ["99999999999999999999", 2**63, "1e30"])
    def test_bound_beyond_integer_range_raises(self, huge):
        with pytest.raises(InvalidFilterError, match="out of range"):
            compose_company_search({"maxEmployees": huge})

    def test_largest_integer_bound_accepted(self):
        listing = compose_company_search({"minEmployees": str(2**63 - 1)})
        assert _exprs(listing) == [("num_employees", Operator.GTE, 2**63 - 1)]

    def test_negative_bound_raises(self):
        with pytest.raises(InvalidFilterError, match="negative"):
            compose_company_search({"maxEmployees": "-1"})

    def test_min_greater_than_max_raises(self):
        with pytest.raises(InvalidFilterError, match="greater"):
            compose_company_search({"minEmployees": 5, "maxEmployees": 1})

    def test_equal_bounds_allowed(self):
        listing = compose_company_search({"minEmployees": 2, "maxEmployees": 2})
        assert len(listing.predicate.expressions) == 2

    def test_name_is_stored_raw(self):
        """Wildcards are escaped at SQL build time, not here."""
        listing = compose_company_search({"name": "50%_off"})
        assert _exprs(listing) == [("name", Operator.LK, "50%_off")]

    def test_same_input_same_output(self):
        query = {"name": "net", "minEmployees": "10", "maxEmployees": "500"}

        first = compose_company_search(query)
        second = compose_company_search(query)

        assert first == second
        assert type(first) is type(second)
        assert query == {"name": "net", "minEmployees": "10", "maxEmployees": "500"}


class TestComposeJobSearch:
    """Job filter composition."""

    @pytest.mark.parametrize("spec", [None, {}, JobSearch(), {"title": ""}])
    def test_no_filters(self, spec):
        assert compose_job_search(spec) is None

    def test_all_three_in_order(self):
        listing = compose_job_search({"title": "eng", "minSalary": "50000", "hasEquity": "true"})

        assert isinstance(listing, JobListing)
        assert _exprs(listing) == [
            ("title", Operator.LK, "eng"),
            ("salary", Operator.GTE, 50000),
            ("equity", Operator.GT, 0),
        ]

    def test_has_equity_boolean_true(self):
        listing = compose_job_search({"hasEquity": True})
        assert _exprs(listing) == [("equity", Operator.GT, 0)]

    @pytest.mark.parametrize("flag", ["false", False, "yes", "TRUE"])
    def test_has_equity_not_true_adds_nothing(self, flag):
        listing = compose_job_search({"hasEquity": flag})

        assert isinstance(listing, JobListing)
        assert listing.predicate.is_empty()

    def test_min_salary_non_numeric_raises(self):
        with pytest.raises(InvalidFilterError, match="minSalary"):
            compose_job_search({"minSalary": "lots"})

    def test_min_salary_numeric_passthrough(self):
        listing = compose_job_search(JobSearch(min_salary=12.5))
        assert _exprs(listing) == [("salary", Operator.GTE, 12.5)]

    @pytest.mark.parametrize("bad", ["1_000", "\u0663\u0660", "99999999999999999999"])
    def test_min_salary_not_plain_or_too_large_raises(self, bad):
        with pytest.raises(InvalidFilterError, match="minSalary"):
            compose_job_search({"minSalary": bad})

    def test_same_input_same_output(self):
        query = {"title": "eng", "minSalary": "50000", "hasEquity": "true"}

        first = compose_job_search(query)
        second = compose_job_search(query)

        assert first == second
        assert query == {"title": "eng", "minSalary": "50000", "hasEquity": "true"}


class TestParseSearch:
    """Query-string validation."""

    def test_company_known_keys(self):
        spec = parse_company_search({"name": "c", "minEmployees": "1", "maxEmployees": "9"})
        assert spec == CompanySearch(name="c", min_employees="1", max_employees="9")

    def test_company_unknown_key_rejected(self):
        with pytest.raises(InvalidFilterError, match="nope"):
            parse_company_search({"nope": "x"})

    def test_job_known_keys(self):
        spec = parse_job_search({"title": "t", "minSalary": "5", "hasEquity": "true"})
        assert spec == JobSearch(title="t", min_salary="5", has_equity="true")

    def test_job_unknown_key_rejected(self):
        with pytest.raises(InvalidFilterError):
            parse_job_search({"company": "c1"})


class TestSearchModels:
    """Conversion of listings into search models."""

    def test_company_default(self):
        sm = company_search_model(None)

        assert sm.entity_name == "companies"
        assert 'num_employees AS "numEmployees"' in sm.columns
        assert sm.filter.is_empty()
        assert sm.sort == ["name"]

    def test_company_filtered(self):
        listing = compose_company_search({"name": "c"})
        sm = company_search_model(listing)

        assert sm.filter is listing.predicate
        assert sm.columns == list(CompanyListing.columns)

    def test_job_default(self):
        sm = job_search_model(None)
        assert sm.entity_name == "jobs"
        assert sm.sort == ["salary"]

    def test_job_filtered(self):
        listing = compose_job_search({"minSalary": 1})
        sm = job_search_model(listing)
        assert sm.filter.expressions == [FilterExpression("salary", Operator.GTE, 1)]
