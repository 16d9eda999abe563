import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from ..session import verify_access

log = logging.getLogger("jobly.auth")

bearer = HTTPBearer(auto_error=False)


def require_auth(creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer)) -> Dict[str, Any]:
    if not creds or creds.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Missing bearer token")
    try:
        return verify_access(creds.credentials)  # payload with sub/email/roles
    except Exception as e:
        log.warning("Token rejected: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired token")


def require_roles_access(required: List[str]):
    def _dep(claims=Depends(require_auth)):
        have = set(claims.get("roles", []))
        if not set(required).issubset(have):
            raise HTTPException(status_code=403, detail="Forbidden: missing role")
        return claims

    return _dep


def require_self_or_roles(required: List[str]):
    """
    Allow the user named by the ``username`` path parameter, or anyone
    holding all of `required`.
    """
    def _dep(username: str, claims=Depends(require_auth)):
        if claims.get("sub") == username:
            return claims
        have = set(claims.get("roles", []))
        if not set(required).issubset(have):
            raise HTTPException(status_code=403, detail="Forbidden: not this user")
        return claims

    return _dep
