"""
sqlitemgr Core — connection opening, SQL execution, DDL synthesis.

Infrastructure plumbing. The manager depends on core. No printing here.

Functions:
- open_db()                 -> open/create .sqlite file, return conn
- run_sql()                 -> execute SQL, return list[dict]
- build_create_table_sql()  -> CREATE TABLE IF NOT EXISTS text
"""

import sqlite3
from collections.abc import Iterable, Mapping
from typing import Union

from sqlitemgr.config import BUSY_TIMEOUT

Columns = Union[Mapping[str, str], Iterable[tuple[str, str]]]

# Older interpreters raise sqlite3.Warning (not an sqlite3.Error) for
# "You can only execute one statement at a time."
ENGINE_ERRORS = (sqlite3.Error, sqlite3.Warning)


def open_db(db_path: str, timeout: float = BUSY_TIMEOUT) -> sqlite3.Connection:
    """Open (creating if absent) a database file in autocommit mode.

    Forces the file open with a schema read so that a directory, an
    unwritable location or a non-database file fails here rather than
    on the first user statement.
    """
    db = sqlite3.connect(db_path, timeout=timeout, isolation_level=None)
    try:
        db.row_factory = sqlite3.Row
        db.execute("PRAGMA schema_version").fetchone()
    except sqlite3.Error:
        db.close()
        raise
    return db


def run_sql(db: sqlite3.Connection, query: str,
            params: Union[tuple, Mapping] = ()) -> list[dict]:
    """Execute SQL, return list of dicts."""
    rows = db.execute(query, params).fetchall()
    return [dict(r) for r in rows]


def column_pairs(columns: Columns) -> list[tuple[str, str]]:
    """Normalize a column mapping or pair sequence to an ordered pair list."""
    if isinstance(columns, Mapping):
        return list(columns.items())
    return [(name, col_type) for name, col_type in columns]


def build_create_table_sql(table_name: str, columns: Columns) -> str:
    """CREATE TABLE IF NOT EXISTS <name> (<col> <type>, ...);

    Names and type clauses are inserted as given. Type clauses may be
    empty (SQLite accepts untyped columns).
    """
    definitions = [f"{name} {col_type}" for name, col_type in column_pairs(columns)]
    return f"CREATE TABLE IF NOT EXISTS {table_name} ({', '.join(definitions)});"
