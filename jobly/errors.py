"""
Error types raised by the Jobly data service.

Routers translate these into HTTP errors using ``status_code``.
"""

from __future__ import annotations


class JoblyError(Exception):
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    status_code = 400


class InvalidInputError(BadRequestError):
    """A partial update was requested with nothing to update."""


class InvalidFilterError(BadRequestError):
    """A listing filter could not be coerced to a usable value."""


class UnauthorizedError(JoblyError):
    status_code = 401


class NotFoundError(JoblyError):
    status_code = 404


__all__ = [
    "JoblyError",
    "BadRequestError",
    "InvalidInputError",
    "InvalidFilterError",
    "UnauthorizedError",
    "NotFoundError",
]
