"""
Filter system for the Jobly data service.

This module provides filter models and the company/job listing filters.
"""

from .models import (
    Operator,
    FilterExpression,
    FilterCollection,
    SearchModel,
)
from .search import (
    CompanySearch,
    JobSearch,
    CompanyListing,
    CompanyListingWithCount,
    JobListing,
    compose_company_search,
    compose_job_search,
    parse_company_search,
    parse_job_search,
    company_search_model,
    job_search_model,
)

__all__ = [
    "Operator",
    "FilterExpression",
    "FilterCollection",
    "SearchModel",
    "CompanySearch",
    "JobSearch",
    "CompanyListing",
    "CompanyListingWithCount",
    "JobListing",
    "compose_company_search",
    "compose_job_search",
    "parse_company_search",
    "parse_job_search",
    "company_search_model",
    "job_search_model",
]
