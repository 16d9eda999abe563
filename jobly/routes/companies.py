"""Routes for companies."""

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from ..auth import require_roles_access
from ..errors import JoblyError
from ..filters import parse_company_search
from ..models import Company
from ..validation import COMPANY_NEW_SCHEMA, COMPANY_UPDATE_SCHEMA, validate_payload

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=201, dependencies=[Depends(require_roles_access(["admin"]))])
def create_company(payload: dict = Body(..., description="{ handle, name, description, numEmployees, logoUrl }")):
    try:
        validate_payload(payload, COMPANY_NEW_SCHEMA)
        return {"company": Company.create(payload)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("")
def list_companies(request: Request):
    """
    { companies: [{ handle, name, description, numEmployees, logoUrl }, ...] }

    Optional filters: name (case-insensitive substring), minEmployees, maxEmployees.
    Filtering by name alone leaves numEmployees out.
    """
    try:
        search = parse_company_search(request.query_params)
        return {"companies": Company.find_all(search)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{handle}")
def get_company(handle: str):
    try:
        return {"company": Company.get(handle)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{handle}", dependencies=[Depends(require_roles_access(["admin"]))])
def update_company(handle: str, payload: dict = Body(..., description="{ name, description, numEmployees, logoUrl }")):
    try:
        validate_payload(payload, COMPANY_UPDATE_SCHEMA)
        return {"company": Company.update(handle, payload)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{handle}", dependencies=[Depends(require_roles_access(["admin"]))])
def delete_company(handle: str):
    try:
        Company.remove(handle)
        return {"deleted": handle}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
