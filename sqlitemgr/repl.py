"""
REPL — read a line, parse it, run it against the manager, print the outcome.

State is trivial: awaiting a command, or exiting. Each line is handled to
completion before the next is read. Every recoverable failure is printed
and the loop moves on; run_loop() only returns on exit or end of input.
"""

import logging
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from sqlitemgr.commands import (
    Command, CreateTable, ExecSql, Exit, Help, Invalid, Query, Unknown, parse_command,
)
from sqlitemgr.config import CELL_SEPARATOR, PROMPT
from sqlitemgr.manager import QueryResult, SQLiteManager

log = logging.getLogger(__name__)

EXIT_OK = 0

HELP_TEXT = """
--- SQLite Database Manager CLI Help ---
----------------------------------------
Manage a SQLite database with a handful of commands and plain SQL.
Available commands:
  help                               - Show this help message.
  create_table <table_name> <col1:type1> <col2:type2> ... - Create a new table.
                                       Example: create_table users id:INTEGER_PRIMARY_KEY_AUTOINCREMENT name:TEXT age:INTEGER
                                       Note: Use underscores instead of spaces for column types (e.g., INTEGER_PRIMARY_KEY_AUTOINCREMENT).
  exec_sql <SQL_statement>           - Execute any SQL statement (e.g., INSERT, UPDATE, DELETE).
                                       Example: exec_sql "INSERT INTO users (name, age) VALUES ('Alice', 30);"
  query <SQL_statement>              - Execute a SELECT query and display results.
                                       Example: query "SELECT * FROM users;"
  exit                               - Exit the application.
----------------------------------------"""


# ============================================================
# Rendering
# ============================================================

def _cell(value) -> str:
    return "NULL" if value is None else str(value)


def format_rows(rows: list[dict]) -> list[str]:
    """Header, separator, one line per row. Columns come from the first row."""
    if not rows:
        return []
    headers = list(rows[0].keys())
    lines = [
        CELL_SEPARATOR.join(headers),
        CELL_SEPARATOR.join("-" * len(h) for h in headers),
    ]
    for row in rows:
        lines.append(CELL_SEPARATOR.join(_cell(row.get(h)) for h in headers))
    return lines


def render_result(console: Console, result: QueryResult):
    if not result.ok:
        console.print("[red]Query failed.[/red]")
        return
    if not result.rows:
        console.print("No results found.")
        return
    console.print("--- Query Results ---")
    for line in format_rows(result.rows):
        console.print(line, markup=False)
    console.print("---------------------")


# ============================================================
# Dispatch
# ============================================================

def dispatch(manager: SQLiteManager, command: Command) -> Optional[int]:
    """Run one parsed command. Returns an exit code to stop, None to continue."""
    console = manager.console

    if isinstance(command, Help):
        console.print(HELP_TEXT, markup=False)
    elif isinstance(command, CreateTable):
        manager.create_table(command.name, command.columns)
    elif isinstance(command, ExecSql):
        manager.execute(command.text)
    elif isinstance(command, Query):
        render_result(console, manager.query(command.text))
    elif isinstance(command, Exit):
        console.print("Exiting application. Goodbye!")
        return EXIT_OK
    elif isinstance(command, Invalid):
        console.print(f"[red]{escape(command.message)}[/red]")
    elif isinstance(command, Unknown):
        console.print(
            f"Unknown command: '{escape(command.raw)}'. Type 'help' for available commands."
        )
    return None


def run_line(manager: SQLiteManager, line: str) -> Optional[int]:
    command = parse_command(line)
    log.debug("parsed %r -> %r", line, command)
    return dispatch(manager, command)


def run_commands(manager: SQLiteManager, lines) -> int:
    """Run a fixed list of command lines (the -c path). Stops at exit."""
    for line in lines:
        code = run_line(manager, line)
        if code is not None:
            return code
    return EXIT_OK


def run_loop(manager: SQLiteManager, stream: TextIO, show_help: bool = True) -> int:
    """Interactive loop over stream. Returns the process exit code."""
    console = manager.console
    if show_help:
        console.print(HELP_TEXT, markup=False)

    # Undecodable bytes become U+FFFD instead of ending the loop
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors="replace")

    while True:
        console.print(PROMPT, end="", markup=False)
        try:
            line = stream.readline()
        except KeyboardInterrupt:
            console.print("\n(Use 'exit' to quit)")
            continue

        # readline() returns '' only at end of input; a blank line is '\n'
        if line == "":
            console.print()
            console.print("Exiting application. Goodbye!")
            return EXIT_OK

        code = run_line(manager, line)
        if code is not None:
            return code
