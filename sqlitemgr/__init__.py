"""
sqlitemgr — a line-oriented shell over a single SQLite file.

Type a command, get a table back.

Modules:
  config.py    defaults + environment overrides
  errors.py    fatal vs recoverable error types
  core.py      infrastructure: open the file, run SQL, build DDL
  manager.py   SQLiteManager: create_table / execute / query
  commands.py  text -> command variants (parse step, no I/O)
  repl.py      the read-eval-print loop and result rendering
  cli.py       argparse entry point
"""

__version__ = "0.1.0"

from sqlitemgr.manager import SQLiteManager, StatementResult, QueryResult  # noqa: F401
