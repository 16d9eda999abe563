import logging
import time
from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException, Request, Response
from pydantic import BaseModel

from ..errors import JoblyError, NotFoundError
from ..models import User
from ..session import (
    issue_tokens,
    verify_refresh,
    set_refresh_cookie,
    clear_refresh_cookie,
)
from ..session.jwt import COOKIE_NAME
from ..validation import USER_AUTH_SCHEMA, USER_REGISTER_SCHEMA, validate_payload

log = logging.getLogger("jobly.auth")

router = APIRouter(prefix="/auth", tags=["auth"])


class TokenOut(BaseModel):
    token: str
    token_type: str = "Bearer"
    expires_in: int


def map_roles(user: Dict[str, Any]) -> List[str]:
    return ["admin"] if user.get("isAdmin") else []


def create_token(user: Dict[str, Any], response: Response) -> TokenOut:
    """Issue an access token for `user` and set the matching refresh cookie."""
    access, access_exp, refresh, refresh_exp = issue_tokens(
        {"sub": user["username"], "email": user.get("email")}, map_roles(user)
    )
    set_refresh_cookie(response, refresh, refresh_exp)
    return TokenOut(token=access, expires_in=access_exp - int(time.time()))


@router.post("/token", response_model=TokenOut)
def token(response: Response, payload: dict = Body(..., description="{ username, password }")):
    try:
        validate_payload(payload, USER_AUTH_SCHEMA)
        user = User.authenticate(payload["username"], payload["password"])
        return create_token(user, response)
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/register", response_model=TokenOut, status_code=201)
def register(response: Response, payload: dict = Body(..., description="New user")):
    try:
        validate_payload(payload, USER_REGISTER_SCHEMA)
        user = User.register({**payload, "isAdmin": False})
        return create_token(user, response)
    except JoblyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/refresh", response_model=TokenOut)
def refresh(request: Request, response: Response):
    cookie = request.cookies.get(COOKIE_NAME)
    if not cookie:
        raise HTTPException(status_code=401, detail="missing refresh cookie")

    try:
        payload = verify_refresh(cookie)
    except Exception as e:
        log.warning("Refresh token rejected: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired refresh token")

    # roles come from the current user row, not the old token
    try:
        user = User.get(payload["sub"])
    except NotFoundError:
        raise HTTPException(status_code=401, detail="User no longer exists")
    return create_token(user, response)


@router.post("/logout")
def logout(response: Response):
    clear_refresh_cookie(response)
    return {"ok": True}
