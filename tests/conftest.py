"""
sqlitemgr Test Fixtures

Every test gets its own database file under tmp_path and a console whose
output is captured in memory (no terminal, no colour codes).

Run with: pytest tests/ -v
"""
import io

import pytest


@pytest.fixture
def console():
    """Console writing to a StringIO. Read it back with the out fixture."""
    from sqlitemgr.manager import make_console
    return make_console(file=io.StringIO(), width=200)


@pytest.fixture
def out(console):
    """Callable returning everything printed so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.sqlite"


@pytest.fixture
def manager(db_path, console):
    """Manager on a fresh file. Console is cleared after the connect banner."""
    from sqlitemgr.manager import SQLiteManager
    mgr = SQLiteManager(db_path, console=console)
    console.file.seek(0)
    console.file.truncate()
    yield mgr
    mgr.close()


@pytest.fixture
def users_table(manager):
    """Manager with t(a INTEGER, b TEXT) already created."""
    manager.conn.execute("CREATE TABLE t (a INTEGER, b TEXT)")
    return manager
