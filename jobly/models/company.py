import logging
from typing import Any, Dict, List, Mapping, Union

from ..database import execute_query, paramstyle, uses_ilike
from ..errors import BadRequestError, NotFoundError
from ..filters import CompanySearch, compose_company_search, company_search_model
from ..query import build_select_from_search, sql_for_partial_update
from .common import first, new_sink

log = logging.getLogger("jobly.models")

_COMPANY_FIELDS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


class Company:
    """Related functions for companies."""

    @staticmethod
    def create(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a company from { handle, name, description, numEmployees, logoUrl }.

        Returns the same fields. Raises BadRequestError if the handle is taken.
        """
        handle = data["handle"]

        sink = new_sink()
        dup = execute_query(
            f"SELECT handle FROM companies WHERE handle = {sink.add(handle)}",
            sink.bundle(),
        )
        if dup:
            raise BadRequestError(f"Duplicate company: {handle}")

        sink = new_sink()
        phs = ", ".join(
            sink.add(v)
            for v in (
                handle,
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            )
        )
        rows = execute_query(
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ({phs})
                RETURNING {_COMPANY_FIELDS}""",
            sink.bundle(),
        )
        log.info("Created company %s", handle)
        return rows[0]

    @staticmethod
    def find_all(query: Union[CompanySearch, Mapping[str, Any], None] = None) -> List[Dict[str, Any]]:
        """
        All companies ordered by name, optionally filtered by
        name / minEmployees / maxEmployees.

        A name-only filter leaves numEmployees out of the rows.
        """
        listing = compose_company_search(query)
        if listing is not None:
            log.debug("Company filter: %s", listing.predicate.to_dict())
        build = build_select_from_search(
            company_search_model(listing),
            paramstyle=paramstyle(),
            use_ilike=uses_ilike(),
        )
        return execute_query(build.sql, build.params)

    @staticmethod
    def get(handle: str) -> Dict[str, Any]:
        """
        Company data plus its jobs as [{ id, title, salary, equity }, ...].

        Raises NotFoundError if not found.
        """
        sink = new_sink()
        company = first(execute_query(
            f"SELECT {_COMPANY_FIELDS} FROM companies WHERE handle = {sink.add(handle)}",
            sink.bundle(),
        ))
        if not company:
            raise NotFoundError(f"No company: {handle}")

        sink = new_sink()
        company["jobs"] = execute_query(
            f"""SELECT id, title, salary, equity
                FROM jobs
                WHERE company_handle = {sink.add(handle)}
                ORDER BY id""",
            sink.bundle(),
        )
        return company

    @staticmethod
    def update(handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update: only the fields present in `data` change.

        Data can include { name, description, numEmployees, logoUrl }.
        Raises NotFoundError if not found.
        """
        update = sql_for_partial_update(
            data,
            {
                "numEmployees": "num_employees",
                "logoUrl": "logo_url",
            },
        )
        sink = new_sink()
        set_cols = update.render(sink)
        handle_ph = sink.add(handle)

        company = first(execute_query(
            f"""UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_ph}
                RETURNING {_COMPANY_FIELDS}""",
            sink.bundle(),
        ))
        if not company:
            raise NotFoundError(f"No company: {handle}")
        return company

    @staticmethod
    def remove(handle: str) -> None:
        sink = new_sink()
        deleted = execute_query(
            f"DELETE FROM companies WHERE handle = {sink.add(handle)} RETURNING handle",
            sink.bundle(),
        )
        if not deleted:
            raise NotFoundError(f"No company: {handle}")
        log.info("Deleted company %s", handle)
