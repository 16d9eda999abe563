"""
JSON Schemas (Draft 7) for request bodies.
"""

from typing import Any, Dict

from ..database import MAX_INTEGER

_DRAFT = "http://json-schema.org/draft-07/schema#"

_HANDLE = {"type": "string", "minLength": 1, "maxLength": 25}
_USERNAME = {"type": "string", "minLength": 1, "maxLength": 25}
_PASSWORD = {"type": "string", "minLength": 5, "maxLength": 20}
_PERSON_NAME = {"type": "string", "minLength": 1, "maxLength": 30}
_EMAIL = {"type": "string", "format": "email", "minLength": 6, "maxLength": 60}
_SALARY = {"type": "integer", "minimum": 0, "maximum": MAX_INTEGER}
_COUNT = {"type": "integer", "minimum": 0, "maximum": MAX_INTEGER}
_EQUITY = {"type": "number", "minimum": 0, "maximum": 1}

COMPANY_NEW_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "New company",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "handle": _HANDLE,
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "numEmployees": _COUNT,
        "logoUrl": {"type": "string", "format": "uri"},
    },
    "required": ["handle", "name", "description"],
}

COMPANY_UPDATE_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "Company update",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "numEmployees": _COUNT,
        "logoUrl": {"type": "string", "format": "uri"},
    },
}

JOB_NEW_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "New job",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "id": {"type": "integer", "minimum": 1, "maximum": MAX_INTEGER},
        "title": {"type": "string", "minLength": 1},
        "salary": _SALARY,
        "equity": _EQUITY,
        "companyHandle": _HANDLE,
    },
    "required": ["title", "companyHandle"],
}

JOB_UPDATE_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "Job update",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "salary": _SALARY,
        "equity": _EQUITY,
    },
}

USER_AUTH_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "User credentials",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "username": _USERNAME,
        "password": _PASSWORD,
    },
    "required": ["username", "password"],
}

USER_REGISTER_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "User registration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "username": _USERNAME,
        "password": _PASSWORD,
        "firstName": _PERSON_NAME,
        "lastName": _PERSON_NAME,
        "email": _EMAIL,
    },
    "required": ["username", "password", "firstName", "lastName", "email"],
}

# admins may create other admins
USER_NEW_SCHEMA: Dict[str, Any] = {
    **USER_REGISTER_SCHEMA,
    "title": "New user",
    "properties": {
        **USER_REGISTER_SCHEMA["properties"],
        "isAdmin": {"type": "boolean"},
    },
}

USER_UPDATE_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "title": "User update",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "password": _PASSWORD,
        "firstName": _PERSON_NAME,
        "lastName": _PERSON_NAME,
        "email": _EMAIL,
    },
}
