"""
SQLiteManager — one connection, three ways to run SQL.

    with SQLiteManager("examples.sqlite") as mgr:
        mgr.create_table("users", {"id": "INTEGER PRIMARY KEY", "name": "TEXT"})
        mgr.execute("INSERT INTO users (name) VALUES ('Alice')")
        result = mgr.query("SELECT * FROM users WHERE name = ?", ("Alice",))

Every operation reports what it is doing on the console. Engine errors
never escape create_table/execute/query: they come back inside the result
(or as False from create_table). Only the constructor raises.
"""

import logging
import sqlite3
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape

from sqlitemgr.config import DEFAULT_DB_FILE
from sqlitemgr.core import (
    ENGINE_ERRORS, Columns, build_create_table_sql, column_pairs, open_db, run_sql,
)
from sqlitemgr.errors import DatabaseConnectionError, SqlExecutionError

log = logging.getLogger(__name__)


@dataclass
class StatementResult:
    """Outcome of execute(). affected_rows is None only on failure."""
    sql: str
    affected_rows: Optional[int] = None
    error: Optional[SqlExecutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class QueryResult:
    """Outcome of query(). rows is empty both on failure and on no match;
    check .ok to tell them apart."""
    sql: str
    rows: list[dict] = field(default_factory=list)
    error: Optional[SqlExecutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def columns(self) -> list[str]:
        return list(self.rows[0].keys()) if self.rows else []

    def __iter__(self):
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __bool__(self) -> bool:
        return bool(self.rows)


def make_console(**kwargs) -> Console:
    """Console used for all user-facing output (stdout, no wrapping)."""
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("soft_wrap", True)
    # :name: in SQL text or values must print literally
    kwargs.setdefault("emoji", False)
    return Console(**kwargs)


class SQLiteManager:
    """Owns the single database connection for the process."""

    def __init__(self, db_path: Union[str, Path] = DEFAULT_DB_FILE,
                 console: Optional[Console] = None):
        self.db_path = str(db_path)
        self.console = console or make_console()
        self.conn = self._connect()

    def _connect(self) -> sqlite3.Connection:
        if not Path(self.db_path).exists():
            self.console.print(f"Creating new SQLite database: {escape(self.db_path)}")
        try:
            conn = open_db(self.db_path)
        except sqlite3.Error as e:
            log.debug("open failed for %s: %s", self.db_path, e)
            raise DatabaseConnectionError(self.db_path, str(e)) from e
        self.console.print(
            f"[green]Successfully connected to SQLite database:[/green] {escape(self.db_path)}"
        )
        return conn

    # ------------------------------------------------------------------
    # create_table
    # ------------------------------------------------------------------

    def create_table(self, table_name: str, columns: Columns) -> bool:
        pairs = column_pairs(columns)
        if not pairs:
            self.console.print("[red]Error: No columns provided for table creation.[/red]")
            return False
        if not table_name:
            self.console.print("[red]Error: No table name provided for table creation.[/red]")
            return False

        sql = build_create_table_sql(table_name, pairs)
        self.console.print(
            f"Attempting to create table: {escape(table_name)} with SQL: {escape(sql)}"
        )
        try:
            self.conn.execute(sql)
        except ENGINE_ERRORS as e:
            self.console.print(
                f"[red]Error creating table '{escape(table_name)}':[/red] {escape(str(e))}"
            )
            return False
        log.debug("create_table %s (%d columns)", table_name, len(pairs))
        self.console.print(
            f"[green]Table '{escape(table_name)}' created successfully (or already exists).[/green]"
        )
        return True

    # ------------------------------------------------------------------
    # execute — no binding, returns affected-row count
    # ------------------------------------------------------------------

    def execute(self, sql: str) -> StatementResult:
        self.console.print(f"Executing SQL: {escape(sql)}")
        t0 = time.time()
        try:
            cursor = self.conn.execute(sql)
        except ENGINE_ERRORS as e:
            self.console.print(f"[red]Error executing SQL:[/red] {escape(str(e))}")
            return StatementResult(sql, error=SqlExecutionError(sql, str(e)))

        # rowcount is -1 for DDL, SELECT and anything else without a count
        affected = max(cursor.rowcount, 0)
        cursor.close()
        log.debug("execute: %d rows in %.1fms", affected, (time.time() - t0) * 1000)
        self.console.print(
            f"[green]SQL executed successfully.[/green] Affected rows: {affected}"
        )
        return StatementResult(sql, affected_rows=affected)

    # ------------------------------------------------------------------
    # query — prepared + bound, all rows materialized
    # ------------------------------------------------------------------

    def query(self, sql: str, params: Union[tuple, dict] = ()) -> QueryResult:
        self.console.print(f"Executing query: {escape(sql)}")
        t0 = time.time()
        try:
            rows = run_sql(self.conn, sql, params)
        except ENGINE_ERRORS as e:
            self.console.print(f"[red]Error executing query:[/red] {escape(str(e))}")
            return QueryResult(sql, error=SqlExecutionError(sql, str(e)))

        log.debug("query: %d rows in %.1fms", len(rows), (time.time() - t0) * 1000)
        self.console.print(
            f"[green]Query executed successfully.[/green] Found {len(rows)} rows."
        )
        return QueryResult(sql, rows=rows)

    def close(self):
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
