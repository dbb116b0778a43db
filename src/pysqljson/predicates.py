"""Predicates and expressions over values nested inside JSON columns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from io import StringIO
from typing import Any

from pysqljson._errors import ERR_MSG_INVALID_OPERATOR, InvalidOperatorError
from pysqljson._operators import COMPARISON_OPERATORS, SUPPORTED_OPERATORS
from pysqljson._utils import validate_column_name
from pysqljson.builder import Expression, Predicate
from pysqljson.dialect import DialectName, write_param_placeholder, write_value_path
from pysqljson.jsonpath import Path, Segment, to_path
from pysqljson.options import Modifier, PathOptions

PathSource = str | Path | Iterable[str | Segment]


@dataclass(frozen=True)
class ValuePath(Expression):
    """The extracted JSON value itself, e.g. for a selected column."""

    column: str
    path: Path
    options: PathOptions = PathOptions()

    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        write_value_path(w, dialect, self.column, self.path, self.options)
        return []


@dataclass(frozen=True)
class ValueCompare(Predicate):
    """``<extracted value> <op> <placeholder>``."""

    target: ValuePath
    op: str
    value: Any

    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        self.target.write(w, dialect, start)
        w.write(f" {self.op} ")
        write_param_placeholder(w, dialect, start)
        return [self.value]


@dataclass(frozen=True)
class HasKey(Predicate):
    """``<extracted value> IS NOT NULL``."""

    target: ValuePath

    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        self.target.write(w, dialect, start)
        w.write(" IS NOT NULL")
        return []


def value_path(column: str, path: PathSource, *modifiers: Modifier) -> ValuePath:
    """Build the extraction expression for ``column`` at ``path``.

    Args:
        column: The JSON column, optionally table-qualified.
        path: A dotted path string, a Path, or a sequence of segment strings.
        modifiers: Cast and/or Unquote options, in any order.

    Raises:
        InvalidJSONPathError: If a dotted path string fails to parse.
        InvalidFieldNameError: If the column name is invalid.
    """
    validate_column_name(column)
    return ValuePath(column, to_path(path), PathOptions.from_modifiers(modifiers))


def value_compare(
    column: str, op: str, value: Any, path: PathSource, *modifiers: Modifier
) -> Predicate:
    """Compare the JSON value at ``path`` with ``value`` using ``op``."""
    sql_op = op.strip().upper()
    if sql_op not in SUPPORTED_OPERATORS:
        raise InvalidOperatorError(
            ERR_MSG_INVALID_OPERATOR,
            f"operator {op!r} is not a supported comparison",
        )
    return ValueCompare(value_path(column, path, *modifiers), sql_op, value)


def value_eq(column: str, value: Any, path: PathSource, *modifiers: Modifier) -> Predicate:
    """Assert the JSON value at ``path`` equals ``value``.

    ``value_eq("a", 1, "b.c")`` renders ``"a"->'b'->'c' = $1`` on
    PostgreSQL and ``JSON_EXTRACT(`a`, "$.b.c") = ?`` on MySQL.
    """
    return value_compare(column, COMPARISON_OPERATORS["eq"], value, path, *modifiers)


def value_neq(column: str, value: Any, path: PathSource, *modifiers: Modifier) -> Predicate:
    return value_compare(column, COMPARISON_OPERATORS["neq"], value, path, *modifiers)


def value_lt(column: str, value: Any, path: PathSource, *modifiers: Modifier) -> Predicate:
    return value_compare(column, COMPARISON_OPERATORS["lt"], value, path, *modifiers)


def value_lte(column: str, value: Any, path: PathSource, *modifiers: Modifier) -> Predicate:
    return value_compare(column, COMPARISON_OPERATORS["lte"], value, path, *modifiers)


def value_gt(column: str, value: Any, path: PathSource, *modifiers: Modifier) -> Predicate:
    return value_compare(column, COMPARISON_OPERATORS["gt"], value, path, *modifiers)


def value_gte(column: str, value: Any, path: PathSource, *modifiers: Modifier) -> Predicate:
    return value_compare(column, COMPARISON_OPERATORS["gte"], value, path, *modifiers)


def has_key(column: str, path: PathSource, *modifiers: Modifier) -> Predicate:
    """Assert a value exists at ``path``. Binds no arguments."""
    return HasKey(value_path(column, path, *modifiers))
