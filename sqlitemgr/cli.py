#!/usr/bin/env python3
"""
sqlitemgr CLI — open a database file, then read commands.

pip install sqlitemgr
sqlitemgr                               # examples.sqlite in the current dir
sqlitemgr --db app.sqlite               # any file, created if missing
sqlitemgr -c "query SELECT 1 AS one"    # run commands and exit
"""

import argparse
import logging
import sys

from rich.markup import escape

from sqlitemgr.config import DEFAULT_DB_FILE
from sqlitemgr.errors import DatabaseConnectionError
from sqlitemgr.manager import SQLiteManager, make_console
from sqlitemgr.repl import run_commands, run_loop

EXIT_CONNECTION_FAILED = 1


def _configure_logging(verbose: bool):
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="[sqlitemgr] %(name)s %(levelname)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlitemgr",
        description="Manage a SQLite database from the command line.",
    )
    parser.add_argument("--db", default=DEFAULT_DB_FILE,
                        help=f"Database file, created if missing (default: {DEFAULT_DB_FILE})")
    parser.add_argument("-c", "--command", action="append", dest="commands", metavar="COMMAND",
                        help="Run a command line and exit (repeatable)")
    parser.add_argument("--no-banner", action="store_true",
                        help="Do not print the help text at startup")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging to stderr")
    return parser


def main(argv=None, stdin=None, console=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    console = console or make_console()

    try:
        manager = SQLiteManager(args.db, console=console)
    except DatabaseConnectionError as e:
        console.print(f"[red]Database connection failed:[/red] {escape(e.message)}")
        return EXIT_CONNECTION_FAILED

    with manager:
        if args.commands:
            return run_commands(manager, args.commands)
        return run_loop(manager, stdin or sys.stdin, show_help=not args.no_banner)


def entry():
    sys.exit(main())


if __name__ == "__main__":
    entry()
