import logging
from numbers import Number
from typing import Any, Dict, List, Mapping, Union

from ..database import MAX_INTEGER, execute_query, paramstyle, uses_ilike
from ..errors import BadRequestError, NotFoundError
from ..filters import JobSearch, compose_job_search, job_search_model
from ..query import build_select_from_search, sql_for_partial_update
from .common import first, new_sink, storable_id

log = logging.getLogger("jobly.models")

_JOB_FIELDS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class Job:
    """Related functions for jobs."""

    @staticmethod
    def create(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a job from { id?, title, salary, equity, companyHandle }.

        Returns { id, title, salary, equity, companyHandle }.

        Raises BadRequestError for a duplicate id, a non-text title, a
        negative salary, equity outside 0..1, or an unknown company.
        """
        job_id = data.get("id")
        title = data.get("title")
        salary = data.get("salary")
        equity = data.get("equity")
        company_handle = data.get("companyHandle")

        if job_id is not None:
            if not storable_id(job_id):
                raise BadRequestError(f"Invalid job id: {job_id}")
            sink = new_sink()
            if execute_query(f"SELECT id FROM jobs WHERE id = {sink.add(job_id)}", sink.bundle()):
                raise BadRequestError(f"Duplicate job: {job_id}")
        if not isinstance(title, str):
            raise BadRequestError(f"Invalid title: {title}")
        if salary is not None and (not _is_number(salary) or not 0 <= salary <= MAX_INTEGER):
            raise BadRequestError(f"Invalid salary: {salary}")
        if equity is not None and (not _is_number(equity) or not 0 <= equity <= 1):
            raise BadRequestError(f"Invalid equity: {equity}")

        sink = new_sink()
        company = execute_query(
            f"SELECT handle FROM companies WHERE handle = {sink.add(company_handle)}",
            sink.bundle(),
        )
        if not company:
            raise BadRequestError(f"Invalid company handle: {company_handle}")

        columns = ["title", "salary", "equity", "company_handle"]
        values = [title, salary, equity, company_handle]
        if job_id is not None:
            columns.insert(0, "id")
            values.insert(0, job_id)

        sink = new_sink()
        phs = ", ".join(sink.add(v) for v in values)
        cols = ", ".join(columns)
        rows = execute_query(
            f"""INSERT INTO jobs ({cols})
                VALUES ({phs})
                RETURNING {_JOB_FIELDS}""",
            sink.bundle(),
        )
        job = rows[0]
        log.info("Created job %s for %s", job["id"], company_handle)
        return job

    @staticmethod
    def find_all(query: Union[JobSearch, Mapping[str, Any], None] = None) -> List[Dict[str, Any]]:
        """
        All jobs ordered by salary, optionally filtered by
        title / minSalary / hasEquity.
        """
        listing = compose_job_search(query)
        if listing is not None:
            log.debug("Job filter: %s", listing.predicate.to_dict())
        build = build_select_from_search(
            job_search_model(listing),
            paramstyle=paramstyle(),
            use_ilike=uses_ilike(),
        )
        return execute_query(build.sql, build.params)

    @staticmethod
    def get(job_id: int) -> Dict[str, Any]:
        if not storable_id(job_id):
            raise NotFoundError(f"No job: {job_id}")
        sink = new_sink()
        job = first(execute_query(
            f"SELECT {_JOB_FIELDS} FROM jobs WHERE id = {sink.add(job_id)}",
            sink.bundle(),
        ))
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        return job

    @staticmethod
    def update(job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update of { title, salary, equity }.

        Raises NotFoundError if not found.
        """
        if not storable_id(job_id):
            raise NotFoundError(f"No job: {job_id}")
        update = sql_for_partial_update(data, {})
        sink = new_sink()
        set_cols = update.render(sink)
        id_ph = sink.add(job_id)

        job = first(execute_query(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_ph}
                RETURNING {_JOB_FIELDS}""",
            sink.bundle(),
        ))
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        return job

    @staticmethod
    def remove(job_id: int) -> None:
        if not storable_id(job_id):
            raise NotFoundError(f"No job: {job_id}")
        sink = new_sink()
        deleted = execute_query(
            f"DELETE FROM jobs WHERE id = {sink.add(job_id)} RETURNING id",
            sink.bundle(),
        )
        if not deleted:
            raise NotFoundError(f"No job: {job_id}")
        log.info("Deleted job %s", job_id)
