"""PostgreSQL dialect: JSON access through the ``->`` / ``->>`` operators."""

from __future__ import annotations

from io import StringIO

from pysqljson import _utils
from pysqljson.jsonpath import Index, Path
from pysqljson.options import PathOptions


def quote_identifier(name: str) -> str:
    return _utils.quote_identifier(name, '"')


def write_param_placeholder(w: StringIO, param_index: int) -> None:
    w.write(f"${param_index}")


def write_value_path(
    w: StringIO, column: str, path: Path, opts: PathOptions
) -> None:
    """Write ``"col"->'a'->1->'b'``, one hop per segment.

    Unquote turns the final hop into ``->>``; a cast wraps the whole chain.
    """
    if opts.cast:
        w.write("CAST(")
    w.write(quote_identifier(column))
    last = len(path) - 1
    for i, seg in enumerate(path):
        w.write("->>" if opts.unquote and i == last else "->")
        if isinstance(seg, Index):
            w.write(str(seg.n))
        else:
            w.write(f"'{_utils.escape_string_literal(seg.name)}'")
    if opts.cast:
        w.write(f" AS {opts.cast})")
