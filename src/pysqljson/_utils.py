"""Validation and escaping helpers shared by the dialect writers."""

from __future__ import annotations

from pysqljson._errors import InvalidFieldNameError


def validate_column_name(name: str) -> None:
    """Validate a (possibly table-qualified) column name."""
    if not name:
        raise InvalidFieldNameError(
            "column name cannot be empty",
            "empty column name provided",
        )
    validate_no_null_bytes(name, "column names")
    if any(not part for part in name.split(".")):
        raise InvalidFieldNameError(
            "invalid column name format",
            f"column name {name!r} has an empty qualifier part",
        )


def validate_no_null_bytes(value: str, context: str = "string literals") -> None:
    """Reject strings containing null bytes."""
    if "\x00" in value:
        raise InvalidFieldNameError(
            f"{context} cannot contain null bytes",
            f"null byte found in {context}: {value!r}",
        )


def escape_string_literal(value: str) -> str:
    """Escape a string for use as a SQL string literal."""
    return value.replace("'", "''")


def quote_identifier(name: str, quote: str) -> str:
    """Quote each dotted part of an identifier, doubling embedded quotes."""
    return ".".join(
        f"{quote}{part.replace(quote, quote * 2)}{quote}" for part in name.split(".")
    )
