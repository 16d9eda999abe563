"""
Data access for companies, jobs and users.
"""

from .company import Company
from .job import Job
from .user import User

__all__ = [
    "Company",
    "Job",
    "User",
]
