"""Routes for jobs."""

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from ..auth import require_roles_access
from ..errors import JoblyError
from ..filters import parse_job_search
from ..models import Job
from ..validation import JOB_NEW_SCHEMA, JOB_UPDATE_SCHEMA, validate_payload

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=201, dependencies=[Depends(require_roles_access(["admin"]))])
def create_job(payload: dict = Body(..., description="{ id?, title, salary, equity, companyHandle }")):
    try:
        validate_payload(payload, JOB_NEW_SCHEMA)
        return {"job": Job.create(payload)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("")
def list_jobs(request: Request):
    """
    { jobs: [{ id, title, salary, equity, companyHandle }, ...] }

    Optional filters: title (case-insensitive substring), minSalary, hasEquity=true.
    """
    try:
        search = parse_job_search(request.query_params)
        return {"jobs": Job.find_all(search)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{job_id}")
def get_job(job_id: int):
    try:
        return {"job": Job.get(job_id)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{job_id}", dependencies=[Depends(require_roles_access(["admin"]))])
def update_job(job_id: int, payload: dict = Body(..., description="{ title, salary, equity }")):
    try:
        validate_payload(payload, JOB_UPDATE_SCHEMA)
        return {"job": Job.update(job_id, payload)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{job_id}", dependencies=[Depends(require_roles_access(["admin"]))])
def delete_job(job_id: int):
    try:
        Job.remove(job_id)
        return {"deleted": job_id}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
