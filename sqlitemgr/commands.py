"""
Command parsing — one input line in, one command value out.

No I/O and no database access here; repl.py decides what each variant does.

    parse_command("create_table users id:INTEGER_PRIMARY_KEY name:TEXT")
    -> CreateTable(name='users', columns=(('id', 'INTEGER PRIMARY KEY'), ('name', 'TEXT')))
"""

from dataclasses import dataclass
from typing import Union


CREATE_TABLE_USAGE = "Usage: create_table <table_name> <col1:type1> <col2:type2> ..."
EXEC_SQL_USAGE = "Usage: exec_sql <SQL_statement>"
QUERY_USAGE = "Usage: query <SQL_statement>"


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class CreateTable:
    name: str
    columns: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class ExecSql:
    text: str


@dataclass(frozen=True)
class Query:
    text: str


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class Unknown:
    raw: str


@dataclass(frozen=True)
class Invalid:
    """Recognized command, unusable arguments. message is shown as-is."""
    message: str


Command = Union[Help, CreateTable, ExecSql, Query, Exit, Unknown, Invalid]


def split_command(line: str) -> tuple[str, str]:
    """Split on the first space: (lower-cased command, rest trimmed, case kept)."""
    parts = line.strip().split(" ", 1)
    command = parts[0].lower()
    rest = parts[1].strip() if len(parts) > 1 else ""
    return command, rest


def unquote(text: str) -> str:
    """Drop one pair of double quotes wrapping the whole argument."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1].strip()
    return text


def parse_columns(tokens: list[str]) -> tuple[tuple[tuple[str, str], ...], str | None]:
    """Parse name:type tokens. Returns (columns, offending_token).

    The first token without a colon discards everything parsed so far:
    a table is never created from a partial column list.
    """
    columns = []
    for token in tokens:
        name, sep, col_type = token.partition(":")
        if not sep:
            return (), token
        # INTEGER_PRIMARY_KEY -> INTEGER PRIMARY KEY
        columns.append((name, col_type.replace("_", " ")))
    return tuple(columns), None


def parse_create_table(rest: str) -> Command:
    tokens = rest.split()
    if len(tokens) < 2:
        return Invalid(CREATE_TABLE_USAGE)

    table_name, col_tokens = tokens[0], tokens[1:]
    columns, bad = parse_columns(col_tokens)
    if bad is not None:
        return Invalid(f"Invalid column definition: '{bad}'. Expected format: name:type")
    return CreateTable(table_name, columns)


def parse_command(line: str) -> Command:
    command, rest = split_command(line)

    if command == "help":
        return Help()
    if command == "create_table":
        return parse_create_table(rest)
    if command == "exec_sql":
        text = unquote(rest)
        return ExecSql(text) if text else Invalid(EXEC_SQL_USAGE)
    if command == "query":
        text = unquote(rest)
        return Query(text) if text else Invalid(QUERY_USAGE)
    if command == "exit":
        return Exit()
    return Unknown(command)
