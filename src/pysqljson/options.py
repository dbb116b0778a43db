"""Modifiers that adjust how a JSON path expression is rendered."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pysqljson._errors import ERR_MSG_INVALID_CAST_TYPE, InvalidCastTypeError

# Words ("double precision"), optional (n) or (n, m), optional [] suffixes
_TYPE_NAME_RE = re.compile(
    r"[A-Za-z_][A-Za-z0-9_]*(?: [A-Za-z_][A-Za-z0-9_]*)*"
    r"(?:\(\d+(?:, ?\d+)?\))?(?:\[\])*"
)


@dataclass(frozen=True)
class Cast:
    """Wrap the extracted value in ``CAST(... AS <type>)`` (PostgreSQL only)."""

    type: str

    def __post_init__(self) -> None:
        if not isinstance(self.type, str) or not _TYPE_NAME_RE.fullmatch(self.type):
            raise InvalidCastTypeError(
                ERR_MSG_INVALID_CAST_TYPE,
                f"cast type {self.type!r} is not a plain SQL type name",
            )


@dataclass(frozen=True)
class Unquote:
    """Extract the value as text rather than as a JSON value."""

    flag: bool = True


Modifier = Cast | Unquote


@dataclass(frozen=True)
class PathOptions:
    """The folded modifiers for a single builder call."""

    cast: str | None = None
    unquote: bool = False

    @classmethod
    def from_modifiers(cls, modifiers: tuple[Modifier, ...]) -> PathOptions:
        """Fold modifiers in order; a later modifier of the same kind wins."""
        cast: str | None = None
        unquote = False
        for m in modifiers:
            if isinstance(m, Cast):
                cast = m.type
            elif isinstance(m, Unquote):
                unquote = m.flag
            else:
                raise TypeError(f"unknown path modifier: {m!r}")
        return cls(cast=cast, unquote=unquote)
