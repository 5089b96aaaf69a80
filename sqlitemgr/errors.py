"""
Error types.

Two tiers only:
  DatabaseConnectionError  fatal, raised once at startup
  SqlExecutionError        recoverable, carried inside a result value
"""


class ManagerError(Exception):
    """Base class for sqlitemgr errors."""


class DatabaseConnectionError(ManagerError):
    """The database file could not be opened or created."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
        self.message = message


class SqlExecutionError(ManagerError):
    """The engine rejected a statement. Holds the engine's own message."""

    def __init__(self, sql: str, message: str):
        super().__init__(message)
        self.sql = sql
        self.message = message
