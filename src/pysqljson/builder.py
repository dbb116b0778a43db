"""Minimal statement builder that JSON predicates compose into.

Every expression renders through ``write(w, dialect, start)``: it receives
the next free placeholder index and returns the arguments it bound, so the
number of placeholders consumed is always ``len(args)``. Composite nodes
render their children left to right, handing each one ``start`` plus the
arguments bound so far. No counter is shared between calls.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Protocol, runtime_checkable

from pysqljson._errors import ERR_MSG_INVALID_OPERATOR, InvalidOperatorError
from pysqljson._operators import COMPARISON_OPERATORS
from pysqljson._utils import validate_column_name
from pysqljson.dialect import (
    DEFAULT_DIALECT,
    DialectName,
    get_dialect,
    quote_identifier,
    write_param_placeholder,
)


@runtime_checkable
class Querier(Protocol):
    """Anything that renders to SQL text and its bound arguments."""

    def query(self) -> tuple[str, list[Any]]: ...


@dataclass(frozen=True)
class Fragment:
    """Rendered SQL text plus the arguments it binds, in placeholder order."""

    sql: str
    args: list[Any] = field(default_factory=list)


class Expression(ABC):
    """A renderable SQL expression."""

    @abstractmethod
    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        """Write SQL to ``w`` using placeholders from ``start`` on.

        Returns the bound arguments, one per placeholder written.
        """

    def render(
        self, dialect: str | DialectName = DEFAULT_DIALECT, start: int = 1
    ) -> Fragment:
        w = StringIO()
        args = self.write(w, get_dialect(dialect), start)
        return Fragment(sql=w.getvalue(), args=args)


class Predicate(Expression):
    """A boolean expression usable in a WHERE clause."""


@dataclass(frozen=True)
class ColumnCompare(Predicate):
    """``<column> <op> <placeholder>`` on a plain column."""

    column: str
    op: str
    value: Any

    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        w.write(f"{quote_identifier(dialect, self.column)} {self.op} ")
        write_param_placeholder(w, dialect, start)
        return [self.value]


@dataclass(frozen=True)
class Compound(Predicate):
    """Predicates joined by AND / OR."""

    op: str
    preds: tuple[Predicate, ...]

    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        args: list[Any] = []
        for i, p in enumerate(self.preds):
            if i:
                w.write(f" {self.op} ")
            nested = isinstance(p, Compound) and len(p.preds) > 1
            if nested:
                w.write("(")
            args.extend(p.write(w, dialect, start + len(args)))
            if nested:
                w.write(")")
        return args


@dataclass(frozen=True)
class Not(Predicate):
    pred: Predicate

    def write(self, w: StringIO, dialect: DialectName, start: int) -> list[Any]:
        w.write("NOT (")
        args = self.pred.write(w, dialect, start)
        w.write(")")
        return args


def _column_compare(column: str, name: str, value: Any) -> ColumnCompare:
    validate_column_name(column)
    op = COMPARISON_OPERATORS.get(name)
    if op is None:
        raise InvalidOperatorError(ERR_MSG_INVALID_OPERATOR, f"unknown operator {name!r}")
    return ColumnCompare(column, op, value)


def eq(column: str, value: Any) -> Predicate:
    return _column_compare(column, "eq", value)


def neq(column: str, value: Any) -> Predicate:
    return _column_compare(column, "neq", value)


def lt(column: str, value: Any) -> Predicate:
    return _column_compare(column, "lt", value)


def lte(column: str, value: Any) -> Predicate:
    return _column_compare(column, "lte", value)


def gt(column: str, value: Any) -> Predicate:
    return _column_compare(column, "gt", value)


def gte(column: str, value: Any) -> Predicate:
    return _column_compare(column, "gte", value)


def _compound(op: str, preds: tuple[Predicate, ...]) -> Predicate:
    if not preds:
        raise ValueError(f"{op} requires at least one predicate")
    if len(preds) == 1:
        return preds[0]
    return Compound(op, preds)


def and_(*preds: Predicate) -> Predicate:
    """Join predicates with AND, preserving argument order."""
    return _compound("AND", preds)


def or_(*preds: Predicate) -> Predicate:
    """Join predicates with OR, preserving argument order."""
    return _compound("OR", preds)


def not_(pred: Predicate) -> Predicate:
    return Not(pred)


@dataclass(frozen=True)
class Table:
    name: str

    def __post_init__(self) -> None:
        validate_column_name(self.name)


def table(name: str) -> Table:
    return Table(name)


@dataclass(frozen=True)
class Selector:
    """A SELECT statement. Each builder method returns a new Selector."""

    columns: tuple[str | Expression, ...] = ("*",)
    dialect: DialectName = DEFAULT_DIALECT
    table: Table | None = None
    predicate: Predicate | None = None

    def from_(self, t: Table) -> Selector:
        return dataclasses.replace(self, table=t)

    def where(self, p: Predicate) -> Selector:
        """Add a WHERE predicate; repeated calls are ANDed together."""
        if self.predicate is not None:
            p = and_(self.predicate, p)
        return dataclasses.replace(self, predicate=p)

    def query(self) -> tuple[str, list[Any]]:
        if self.table is None:
            raise ValueError("select requires a table; call from_() first")
        w = StringIO()
        args: list[Any] = []
        w.write("SELECT ")
        for i, col in enumerate(self.columns):
            if i:
                w.write(", ")
            if isinstance(col, Expression):
                args.extend(col.write(w, self.dialect, 1 + len(args)))
            elif col == "*":
                w.write(col)
            else:
                w.write(quote_identifier(self.dialect, col))
        w.write(f" FROM {quote_identifier(self.dialect, self.table.name)}")
        if self.predicate is not None:
            w.write(" WHERE ")
            args.extend(self.predicate.write(w, self.dialect, 1 + len(args)))
        return w.getvalue(), args


def select(
    *columns: str | Expression, dialect: str | DialectName = DEFAULT_DIALECT
) -> Selector:
    """Start a SELECT statement.

    Args:
        columns: Column names or expressions. Defaults to ``*``.
        dialect: SQL dialect to render for. Defaults to MySQL.

    Returns:
        A new Selector.

    Raises:
        ValueError: If the dialect name is unknown.
    """
    for col in columns:
        if isinstance(col, str) and col != "*":
            validate_column_name(col)
    return Selector(columns=columns or ("*",), dialect=get_dialect(dialect))
