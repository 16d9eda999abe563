"""
Validation module for the Jobly data service.

This module provides request body schemas and payload validation.
"""

from .rules import validate_payload
from .schemas import (
    COMPANY_NEW_SCHEMA,
    COMPANY_UPDATE_SCHEMA,
    JOB_NEW_SCHEMA,
    JOB_UPDATE_SCHEMA,
    USER_AUTH_SCHEMA,
    USER_REGISTER_SCHEMA,
    USER_NEW_SCHEMA,
    USER_UPDATE_SCHEMA,
)

__all__ = [
    "validate_payload",
    "COMPANY_NEW_SCHEMA",
    "COMPANY_UPDATE_SCHEMA",
    "JOB_NEW_SCHEMA",
    "JOB_UPDATE_SCHEMA",
    "USER_AUTH_SCHEMA",
    "USER_REGISTER_SCHEMA",
    "USER_NEW_SCHEMA",
    "USER_UPDATE_SCHEMA",
]
