"""Dialect identity shared by the renderers and the statement builder."""

from __future__ import annotations

import enum


class DialectName(enum.StrEnum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"


DEFAULT_DIALECT = DialectName.MYSQL
"""Dialect used by select() when none is given."""
