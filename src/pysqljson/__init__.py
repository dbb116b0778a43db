"""pysqljson - Compile JSON paths into PostgreSQL and MySQL predicates."""

from __future__ import annotations

__version__ = "0.1.0"

from pysqljson._errors import (
    InvalidCastTypeError,
    InvalidFieldNameError,
    InvalidIndexError,
    InvalidJSONPathError,
    InvalidOperatorError,
    MaxPathDepthExceededError,
    SQLJSONError,
    UnterminatedIndexError,
    UnterminatedQuoteError,
)
from pysqljson.builder import (
    Expression,
    Fragment,
    Predicate,
    Querier,
    and_,
    eq,
    gt,
    gte,
    lt,
    lte,
    neq,
    not_,
    or_,
    select,
    table,
)
from pysqljson.dialect import DialectName, get_dialect
from pysqljson.jsonpath import Index, Key, Path, dot_path, parse_path, path
from pysqljson.options import Cast, PathOptions, Unquote
from pysqljson.predicates import (
    has_key,
    value_compare,
    value_eq,
    value_gt,
    value_gte,
    value_lt,
    value_lte,
    value_neq,
    value_path,
)

__all__ = [
    "parse_path",
    "dot_path",
    "path",
    "Path",
    "Key",
    "Index",
    "Cast",
    "Unquote",
    "PathOptions",
    "value_path",
    "value_compare",
    "value_eq",
    "value_neq",
    "value_lt",
    "value_lte",
    "value_gt",
    "value_gte",
    "has_key",
    "Expression",
    "Fragment",
    "Predicate",
    "Querier",
    "select",
    "table",
    "eq",
    "neq",
    "lt",
    "lte",
    "gt",
    "gte",
    "and_",
    "or_",
    "not_",
    "DialectName",
    "get_dialect",
    "SQLJSONError",
    "InvalidJSONPathError",
    "UnterminatedQuoteError",
    "UnterminatedIndexError",
    "InvalidIndexError",
    "MaxPathDepthExceededError",
    "InvalidCastTypeError",
    "InvalidFieldNameError",
    "InvalidOperatorError",
]
