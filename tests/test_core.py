"""
Tests for sqlitemgr core

Tests:
  - open_db(path) -> sqlite3.Connection
  - run_sql(db, sql, params) -> list[dict]
  - build_create_table_sql(name, columns) -> str

Run with: pytest tests/test_core.py -v
"""
import sqlite3

import pytest

from sqlitemgr.core import build_create_table_sql, column_pairs, open_db, run_sql

pytestmark = pytest.mark.unit


# =============================================================================
# open_db
# =============================================================================

class TestOpenDb:
    """open_db(path) creates the file if needed and returns an autocommit conn."""

    def test_returns_connection(self, db_path):
        conn = open_db(str(db_path))
        assert isinstance(conn, sqlite3.Connection)
        conn.close()

    def test_creates_missing_file(self, db_path):
        assert not db_path.exists()
        conn = open_db(str(db_path))
        conn.close()
        assert db_path.exists()

    def test_row_factory_is_row(self, db_path):
        conn = open_db(str(db_path))
        assert conn.row_factory == sqlite3.Row
        conn.close()

    def test_autocommit_visible_to_second_connection(self, db_path):
        conn = open_db(str(db_path))
        conn.execute("CREATE TABLE t (a INTEGER)")
        conn.execute("INSERT INTO t VALUES (1)")
        other = sqlite3.connect(str(db_path))
        assert other.execute("SELECT COUNT(*) FROM t").fetchone()[0] == 1
        other.close()
        conn.close()

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(sqlite3.Error):
            open_db(str(tmp_path / "no" / "such" / "dir.sqlite"))

    def test_non_database_file_raises(self, tmp_path):
        junk = tmp_path / "junk.sqlite"
        junk.write_bytes(b"this is not a database file at all" * 10)
        with pytest.raises(sqlite3.DatabaseError):
            open_db(str(junk))


# =============================================================================
# run_sql
# =============================================================================

class TestRunSQL:
    """run_sql(db, sql, params) executes SQL and returns list[dict]."""

    @pytest.fixture
    def conn(self, db_path):
        conn = open_db(str(db_path))
        conn.execute("CREATE TABLE t (a INTEGER, b TEXT)")
        conn.executemany("INSERT INTO t VALUES (?, ?)", [(1, 'x'), (2, 'y'), (3, 'z')])
        yield conn
        conn.close()

    def test_returns_list_of_dicts(self, conn):
        results = run_sql(conn, "SELECT * FROM t ORDER BY a")
        assert results == [{'a': 1, 'b': 'x'}, {'a': 2, 'b': 'y'}, {'a': 3, 'b': 'z'}]

    def test_keeps_select_column_order(self, conn):
        results = run_sql(conn, "SELECT b, a FROM t LIMIT 1")
        assert list(results[0].keys()) == ['b', 'a']

    def test_positional_params(self, conn):
        results = run_sql(conn, "SELECT b FROM t WHERE a = ?", (2,))
        assert results == [{'b': 'y'}]

    def test_named_params(self, conn):
        results = run_sql(conn, "SELECT a FROM t WHERE b = :b", {'b': 'z'})
        assert results == [{'a': 3}]

    def test_empty_result(self, conn):
        assert run_sql(conn, "SELECT * FROM t WHERE a > 100") == []

    def test_bad_sql_raises(self, conn):
        with pytest.raises(sqlite3.OperationalError):
            run_sql(conn, "SELECT * FROM nonexistent")


# =============================================================================
# build_create_table_sql
# =============================================================================

class TestBuildCreateTableSql:

    def test_basic_statement(self):
        sql = build_create_table_sql("users", {"id": "INTEGER PRIMARY KEY", "name": "TEXT"})
        assert sql == "CREATE TABLE IF NOT EXISTS users (id INTEGER PRIMARY KEY, name TEXT);"

    def test_accepts_pair_sequence(self):
        sql = build_create_table_sql("t", [("a", "INTEGER"), ("b", "TEXT")])
        assert sql == "CREATE TABLE IF NOT EXISTS t (a INTEGER, b TEXT);"

    @pytest.mark.parametrize("pairs", [
        [("a", "INTEGER")],
        [("a", "INTEGER"), ("b", "TEXT")],
        [("id", "INTEGER PRIMARY KEY AUTOINCREMENT"), ("name", "TEXT NOT NULL"),
         ("age", "INTEGER"), ("score", "REAL"), ("blob", "BLOB")],
    ])
    def test_one_clause_entry_per_column_in_order(self, pairs):
        sql = build_create_table_sql("t", pairs)
        clause = sql[sql.index("(") + 1:sql.rindex(")")]
        entries = clause.split(", ")
        assert len(entries) == len(pairs)
        assert [e.split(" ", 1)[0] for e in entries] == [name for name, _ in pairs]

    def test_column_pairs_from_mapping_keeps_order(self):
        assert column_pairs({"z": "TEXT", "a": "INTEGER"}) == [("z", "TEXT"), ("a", "INTEGER")]
