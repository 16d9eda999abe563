# Helpers for issuing/verifying access & refresh tokens
# and setting/clearing the refresh cookie.

from __future__ import annotations
import os, time, secrets
from typing import Any, Dict, List, Tuple
import jwt  # PyJWT

# ---- Config ----------------------------------------------------------------

APP_JWT_SECRET = os.environ.get("APP_JWT_SECRET")
APP_REFRESH_SECRET = os.environ.get("APP_REFRESH_SECRET")
if not APP_JWT_SECRET or not APP_REFRESH_SECRET:
    # Fail fast so you don't get mysterious 500s later
    raise RuntimeError("APP_JWT_SECRET and APP_REFRESH_SECRET must be set")

ISS = os.getenv("APP_JWT_ISS", "http://localhost:8000")
AUD = os.getenv("APP_JWT_AUD", "jobly")

ACCESS_TTL = int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "900"))  # 15m
REFRESH_TTL = int(os.getenv("REFRESH_TOKEN_TTL_SECONDS", "2592000"))  # 30d

COOKIE_NAME = os.getenv("REFRESH_COOKIE_NAME", "refresh")
COOKIE_PATH = os.getenv("REFRESH_COOKIE_PATH", "/auth/refresh")
COOKIE_SAMESITE = os.getenv("REFRESH_COOKIE_SAMESITE", "Lax")  # "None" for cross-site
COOKIE_SECURE = os.getenv("REFRESH_COOKIE_SECURE", "false").lower() == "true"
COOKIE_HTTPONLY = os.getenv("REFRESH_COOKIE_HTTPONLY", "true").lower() == "true"

# ---- Internals -------------------------------------------------------------


def _now_epoch() -> int:
    return int(time.time())


# ---- Public API ------------------------------------------------------------


def issue_tokens(user: Dict[str, Any], roles: List[str]) -> Tuple[str, int, str, int]:
    """
    Returns: (access_token, access_exp_epoch, refresh_token, refresh_exp_epoch)
    - access token: short-lived, includes sub (username)/email/roles
    - refresh token: long-lived, same claims (+ jti) so /auth/refresh can recreate the access token
    """
    iat = _now_epoch()
    access_exp = iat + ACCESS_TTL
    refresh_exp = iat + REFRESH_TTL

    claims = {
        "iss": ISS,
        "aud": AUD,
        "iat": iat,
        "sub": user["sub"],
        "email": user.get("email"),
        "roles": roles,
    }
    access_token = jwt.encode(
        {**claims, "exp": access_exp, "typ": "access"},
        APP_JWT_SECRET,
        algorithm="HS256",
    )
    refresh_token = jwt.encode(
        {**claims, "exp": refresh_exp, "typ": "refresh", "jti": secrets.token_urlsafe(24)},
        APP_REFRESH_SECRET,
        algorithm="HS256",
    )

    return access_token, access_exp, refresh_token, refresh_exp


def _verify(token: str, secret: str, typ: str) -> Dict[str, Any]:
    payload = jwt.decode(
        token,
        secret,
        algorithms=["HS256"],
        audience=AUD,
        issuer=ISS,
        options={"require": ["exp", "iat", "aud", "iss", "sub"]},
    )
    if payload.get("typ") != typ:
        raise jwt.InvalidTokenError("wrong token type")
    return payload


def verify_access(token: str) -> Dict[str, Any]:
    return _verify(token, APP_JWT_SECRET, "access")


def verify_refresh(token: str) -> Dict[str, Any]:
    return _verify(token, APP_REFRESH_SECRET, "refresh")


def set_refresh_cookie(response, refresh_token: str, refresh_exp_epoch: int) -> None:
    response.set_cookie(
        key=COOKIE_NAME,
        value=refresh_token,
        path=COOKIE_PATH,
        secure=COOKIE_SECURE,
        httponly=COOKIE_HTTPONLY,
        samesite=COOKIE_SAMESITE.lower(),
        expires=refresh_exp_epoch - _now_epoch(),
    )


def clear_refresh_cookie(response) -> None:
    response.delete_cookie(
        key=COOKIE_NAME,
        path=COOKIE_PATH,
        secure=COOKIE_SECURE,
        httponly=COOKIE_HTTPONLY,
        samesite=COOKIE_SAMESITE.lower(),
    )
