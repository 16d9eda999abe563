"""
Table definitions for the Jobly store.

Uses SQLAlchemy Core metadata so the same DDL works on SQLite and PostgreSQL.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    false,
)

from .engine import get_engine

metadata = MetaData()

# largest value SQLite INTEGER and PostgreSQL BIGINT can hold
MAX_INTEGER = 2**63 - 1

companies = Table(
    "companies",
    metadata,
    Column("handle", String(25), primary_key=True),
    Column("name", Text, nullable=False, unique=True),
    Column("num_employees", Integer, CheckConstraint("num_employees >= 0")),
    Column("description", Text, nullable=False),
    Column("logo_url", Text),
)

jobs = Table(
    "jobs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("salary", Integer, CheckConstraint("salary >= 0")),
    Column("equity", Numeric, CheckConstraint("equity <= 1.0")),
    Column(
        "company_handle",
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    ),
)

users = Table(
    "users",
    metadata,
    Column("username", String(25), primary_key=True),
    Column("password", Text, nullable=False),
    Column("first_name", Text, nullable=False),
    Column("last_name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("is_admin", Boolean, nullable=False, server_default=false()),
)

applications = Table(
    "applications",
    metadata,
    Column(
        "username",
        String(25),
        ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "job_id",
        Integer,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


def init_schema() -> None:
    """Create any missing tables."""
    metadata.create_all(get_engine())


def drop_schema() -> None:
    metadata.drop_all(get_engine())
