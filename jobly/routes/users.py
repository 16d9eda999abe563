"""Routes for users."""

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from ..auth import require_roles_access, require_self_or_roles
from ..errors import JoblyError
from ..models import User
from ..validation import USER_NEW_SCHEMA, USER_UPDATE_SCHEMA, validate_payload
from .auth_routes import create_token

router = APIRouter(prefix="/users", tags=["users"])

admin_only = Depends(require_roles_access(["admin"]))
self_or_admin = Depends(require_self_or_roles(["admin"]))


@router.post("", status_code=201, dependencies=[admin_only])
def create_user(response: Response, payload: dict = Body(..., description="New user, may set isAdmin")):
    """
    Admin-only registration; unlike /auth/register this can create admins.

    Returns { user, token }.
    """
    try:
        validate_payload(payload, USER_NEW_SCHEMA)
        user = User.register(payload)
        return {"user": user, "token": create_token(user, response).token}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", dependencies=[admin_only])
def list_users():
    return {"users": User.find_all()}


@router.get("/{username}", dependencies=[self_or_admin])
def get_user(username: str):
    try:
        return {"user": User.get(username)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{username}", dependencies=[self_or_admin])
def update_user(username: str, payload: dict = Body(..., description="{ firstName, lastName, password, email }")):
    try:
        validate_payload(payload, USER_UPDATE_SCHEMA)
        return {"user": User.update(username, payload)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{username}", dependencies=[self_or_admin])
def delete_user(username: str):
    try:
        User.remove(username)
        return {"deleted": username}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/{username}/jobs/{job_id}", status_code=201, dependencies=[self_or_admin])
def apply_to_job(username: str, job_id: int):
    try:
        User.apply_to_job(username, job_id)
        return {"applied": job_id}
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
