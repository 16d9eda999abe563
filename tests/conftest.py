"""
Pytest configuration and shared fixtures.
"""

import os

# Set environment variables BEFORE any imports from jobly:
# the session module refuses to load without its secrets and the
# bcrypt cost is read once at import time.
os.environ["APP_JWT_SECRET"] = "test-jwt-secret-0123456789abcdef"
os.environ["APP_REFRESH_SECRET"] = "test-refresh-secret-0123456789abcdef"
os.environ["BCRYPT_WORK_FACTOR"] = "4"

import pytest
from fastapi.testclient import TestClient

from jobly.auth import hash_password
from jobly.database import drop_schema, execute_query, init_schema, reset_engine
from jobly.session import issue_tokens


def _token(username: str, roles=None) -> str:
    access, _, _, _ = issue_tokens(
        {"sub": username, "email": f"{username}@user.com"}, roles or []
    )
    return access


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Empty schema in a throwaway SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'jobly_test.db'}")
    reset_engine()
    init_schema()
    yield
    drop_schema()
    reset_engine()


@pytest.fixture
def seeded(db):
    """Three companies, three jobs, two users and an admin."""
    for handle, name, num, desc, logo in [
        ("c1", "C1", 1, "Desc1", "http://c1.img"),
        ("c2", "C2", 2, "Desc2", "http://c2.img"),
        ("c3", "C3", 3, "Desc3", "http://c3.img"),
    ]:
        execute_query(
            "INSERT INTO companies (handle, name, num_employees, description, logo_url) VALUES (?, ?, ?, ?, ?)",
            [handle, name, num, desc, logo],
        )

    for job_id, title, salary, equity, handle in [
        (1, "JT1", 10, 0, "c1"),
        (2, "JT2", 20, 0.1, "c2"),
        (3, "JT3", 30, 0.2, "c3"),
    ]:
        execute_query(
            "INSERT INTO jobs (id, title, salary, equity, company_handle) VALUES (?, ?, ?, ?, ?)",
            [job_id, title, salary, equity, handle],
        )

    for username, first, last, is_admin in [
        ("u1", "U1F", "U1L", False),
        ("u2", "U2F", "U2L", False),
        ("admin1", "A1F", "A1L", True),
    ]:
        execute_query(
            "INSERT INTO users (username, password, first_name, last_name, email, is_admin) VALUES (?, ?, ?, ?, ?, ?)",
            [username, hash_password(f"password-{username}"), first, last, f"{username}@user.com", is_admin],
        )


@pytest.fixture
def client(seeded):
    """FastAPI test client over the seeded database."""
    from jobly.main import app
    return TestClient(app)


@pytest.fixture
def u1_headers():
    return {"Authorization": f"Bearer {_token('u1')}"}


@pytest.fixture
def u2_headers():
    return {"Authorization": f"Bearer {_token('u2')}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {_token('admin1', ['admin'])}"}
