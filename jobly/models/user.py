import logging
from typing import Any, Dict, List, Mapping

from ..auth.passwords import check_password, hash_password
from ..database import execute_query
from ..errors import BadRequestError, NotFoundError, UnauthorizedError
from ..query import sql_for_partial_update
from .common import first, new_sink, storable_id

log = logging.getLogger("jobly.models")

_USER_FIELDS = (
    'username, first_name AS "firstName", last_name AS "lastName", '
    'email, is_admin AS "isAdmin"'
)


def _user(row: Dict[str, Any]) -> Dict[str, Any]:
    # SQLite hands booleans back as 0/1
    row["isAdmin"] = bool(row["isAdmin"])
    return row


class User:
    """Related functions for users."""

    @staticmethod
    def authenticate(username: str, password: str) -> Dict[str, Any]:
        """
        Check a username/password pair.

        Returns { username, firstName, lastName, email, isAdmin }.
        Raises UnauthorizedError if the user is missing or the password is wrong.
        """
        sink = new_sink()
        user = first(execute_query(
            f"SELECT {_USER_FIELDS}, password FROM users WHERE username = {sink.add(username)}",
            sink.bundle(),
        ))
        if user and check_password(password, user.pop("password")):
            return _user(user)

        log.warning("Rejected credentials for %s", username)
        raise UnauthorizedError("Invalid username/password")

    @staticmethod
    def register(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Register a user from { username, password, firstName, lastName, email, isAdmin }.

        Raises BadRequestError on a duplicate username.
        """
        username = data["username"]

        sink = new_sink()
        if execute_query(f"SELECT username FROM users WHERE username = {sink.add(username)}", sink.bundle()):
            raise BadRequestError(f"Duplicate username: {username}")

        sink = new_sink()
        phs = ", ".join(
            sink.add(v)
            for v in (
                username,
                hash_password(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                bool(data.get("isAdmin", False)),
            )
        )
        rows = execute_query(
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                VALUES ({phs})
                RETURNING {_USER_FIELDS}""",
            sink.bundle(),
        )
        log.info("Registered user %s", username)
        return _user(rows[0])

    @staticmethod
    def find_all() -> List[Dict[str, Any]]:
        rows = execute_query(f"SELECT {_USER_FIELDS} FROM users ORDER BY username")
        return [_user(r) for r in rows]

    @staticmethod
    def get(username: str) -> Dict[str, Any]:
        """
        User data plus the ids of the jobs applied to, as ``jobs``.

        Raises NotFoundError if not found.
        """
        sink = new_sink()
        user = first(execute_query(
            f"SELECT {_USER_FIELDS} FROM users WHERE username = {sink.add(username)}",
            sink.bundle(),
        ))
        if not user:
            raise NotFoundError(f"No user: {username}")

        sink = new_sink()
        applied = execute_query(
            f"SELECT job_id FROM applications WHERE username = {sink.add(username)} ORDER BY job_id",
            sink.bundle(),
        )
        user = _user(user)
        user["jobs"] = [a["job_id"] for a in applied]
        return user

    @staticmethod
    def update(username: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update of { firstName, lastName, password, email, isAdmin }.

        A new password is hashed before it is stored.
        Raises NotFoundError if not found.
        """
        data = dict(data)
        if "password" in data:
            data["password"] = hash_password(data["password"])

        update = sql_for_partial_update(
            data,
            {
                "firstName": "first_name",
                "lastName": "last_name",
                "isAdmin": "is_admin",
            },
        )
        sink = new_sink()
        set_cols = update.render(sink)
        username_ph = sink.add(username)

        user = first(execute_query(
            f"""UPDATE users
                SET {set_cols}
                WHERE username = {username_ph}
                RETURNING {_USER_FIELDS}""",
            sink.bundle(),
        ))
        if not user:
            raise NotFoundError(f"No user: {username}")
        return _user(user)

    @staticmethod
    def remove(username: str) -> None:
        sink = new_sink()
        deleted = execute_query(
            f"DELETE FROM users WHERE username = {sink.add(username)} RETURNING username",
            sink.bundle(),
        )
        if not deleted:
            raise NotFoundError(f"No user: {username}")
        log.info("Deleted user %s", username)

    @staticmethod
    def apply_to_job(username: str, job_id: int) -> None:
        """
        Record that `username` applied to job `job_id`.

        Raises NotFoundError for an unknown user or job, BadRequestError
        if the application already exists.
        """
        if not storable_id(job_id):
            raise NotFoundError(f"No job: {job_id}")
        sink = new_sink()
        if not execute_query(f"SELECT id FROM jobs WHERE id = {sink.add(job_id)}", sink.bundle()):
            raise NotFoundError(f"No job: {job_id}")

        sink = new_sink()
        if not execute_query(f"SELECT username FROM users WHERE username = {sink.add(username)}", sink.bundle()):
            raise NotFoundError(f"No user: {username}")

        sink = new_sink()
        existing = execute_query(
            f"""SELECT job_id FROM applications
                WHERE username = {sink.add(username)} AND job_id = {sink.add(job_id)}""",
            sink.bundle(),
        )
        if existing:
            raise BadRequestError(f"{username} already applied to job {job_id}")

        sink = new_sink()
        execute_query(
            f"INSERT INTO applications (username, job_id) VALUES ({sink.add(username)}, {sink.add(job_id)})",
            sink.bundle(),
        )
        log.info("%s applied to job %s", username, job_id)
