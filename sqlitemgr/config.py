"""
sqlitemgr configuration — edit the defaults here or override via env.

SQLITEMGR_DB       database file opened when --db is not given
SQLITEMGR_TIMEOUT  seconds to wait on a locked database file
"""

import os

DEFAULT_DB_FILE = os.environ.get("SQLITEMGR_DB", "examples.sqlite")

# sqlite3.connect(timeout=...) — how long a statement waits on a file lock
BUSY_TIMEOUT = float(os.environ.get("SQLITEMGR_TIMEOUT", "10"))

PROMPT = "\nEnter command (type 'help' for options): "

# Joins header names and row values in rendered query results
CELL_SEPARATOR = "\t| "
