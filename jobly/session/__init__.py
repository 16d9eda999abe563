"""
Session management for the Jobly data service.

This module handles JWT token creation, validation, and refresh logic.
"""

from .jwt import (
    issue_tokens,
    verify_access,
    verify_refresh,
    set_refresh_cookie,
    clear_refresh_cookie,
)

__all__ = [
    "issue_tokens",
    "verify_access",
    "verify_refresh",
    "set_refresh_cookie",
    "clear_refresh_cookie",
]
