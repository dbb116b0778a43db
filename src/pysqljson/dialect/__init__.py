"""SQL dialect dispatch for JSON path rendering.

Exactly two dialect families exist, so every entry point matches on
:class:`DialectName` rather than looking up a registry.
"""

from __future__ import annotations

from io import StringIO
from typing import assert_never

from pysqljson.dialect import mysql, postgres
from pysqljson.dialect._base import DEFAULT_DIALECT, DialectName
from pysqljson.jsonpath import Path
from pysqljson.options import PathOptions

__all__ = [
    "DEFAULT_DIALECT",
    "DialectName",
    "get_dialect",
    "quote_identifier",
    "write_param_placeholder",
    "write_value_path",
]


def get_dialect(name: str | DialectName) -> DialectName:
    """Resolve a dialect name.

    Args:
        name: Dialect name ("postgresql" or "mysql").

    Returns:
        The matching DialectName.

    Raises:
        ValueError: If the dialect name is unknown.
    """
    try:
        return DialectName(name)
    except ValueError:
        raise ValueError(
            f"unknown dialect: {name!r}. "
            f"Available: {', '.join(sorted(DialectName))}"
        ) from None


def quote_identifier(dialect: str | DialectName, name: str) -> str:
    match get_dialect(dialect):
        case DialectName.POSTGRESQL:
            return postgres.quote_identifier(name)
        case DialectName.MYSQL:
            return mysql.quote_identifier(name)
        case unreachable:
            assert_never(unreachable)


def write_param_placeholder(
    w: StringIO, dialect: str | DialectName, param_index: int
) -> None:
    match get_dialect(dialect):
        case DialectName.POSTGRESQL:
            postgres.write_param_placeholder(w, param_index)
        case DialectName.MYSQL:
            mysql.write_param_placeholder(w, param_index)
        case unreachable:
            assert_never(unreachable)


def write_value_path(
    w: StringIO,
    dialect: str | DialectName,
    column: str,
    path: Path,
    opts: PathOptions,
) -> None:
    """Write the JSON extraction expression for ``column`` at ``path``."""
    match get_dialect(dialect):
        case DialectName.POSTGRESQL:
            postgres.write_value_path(w, column, path, opts)
        case DialectName.MYSQL:
            mysql.write_value_path(w, column, path, opts)
        case unreachable:
            assert_never(unreachable)
