import logging, os
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

log = logging.getLogger("jobly.database")

DEFAULT_DATABASE_URL = "sqlite:///jobly.db"

# DBAPI paramstyle -> placeholder style understood by query._ParamSink
_PARAMSTYLES = {
    "qmark": "qmark",
    "format": "format",
    "pyformat": "pyformat",
    "numeric_dollar": "dollar",
}

_engine: Optional[Engine] = None


def _database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def _enable_sqlite_foreign_keys(dbapi_conn, _record) -> None:
    # SQLite ignores ON DELETE CASCADE unless asked per connection
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON")
    finally:
        cur.close()


def get_engine() -> Engine:
    """Return the process-wide engine, creating it from DATABASE_URL on first use."""
    global _engine
    if _engine is None:
        url = _database_url()
        _engine = create_engine(url)
        if _engine.dialect.name == "sqlite":
            event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
        log.info("Database engine created for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def reset_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def paramstyle() -> str:
    style = get_engine().dialect.paramstyle
    if style not in _PARAMSTYLES:
        raise RuntimeError(f"Unsupported DBAPI paramstyle: {style}")
    return _PARAMSTYLES[style]


def uses_ilike() -> bool:
    return get_engine().dialect.name == "postgresql"


def execute_query(
    sql: str,
    params: Union[Sequence[Any], Dict[str, Any], None] = None,
) -> List[Dict[str, Any]]:
    """
    Run one statement in its own transaction and return its rows as dicts.

    `sql` must use the driver's native placeholders (see `paramstyle()`).
    Statements that return nothing yield an empty list.
    """
    if params is None:
        params = ()
    elif not isinstance(params, dict):
        params = tuple(params)

    log.debug("SQL: %s | params=%s", sql, params)
    with get_engine().begin() as conn:
        result = conn.exec_driver_sql(sql, params)
        if not result.returns_rows:
            return []
        return [dict(row._mapping) for row in result]
