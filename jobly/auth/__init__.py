"""
Authentication module for the Jobly data service.

This module handles bearer token checks, role requirements and password hashing.
"""

from .passwords import (
    hash_password,
    check_password,
)
from .require import (
    require_auth,
    require_roles_access,
    require_self_or_roles,
)

__all__ = [
    "hash_password",
    "check_password",
    "require_auth",
    "require_roles_access",
    "require_self_or_roles",
]
