"""MySQL dialect: JSON access through ``JSON_EXTRACT`` / ``JSON_UNQUOTE``."""

from __future__ import annotations

import logging
from io import StringIO

from pysqljson import _utils
from pysqljson.jsonpath import Index, Path
from pysqljson.options import PathOptions

logger = logging.getLogger(__name__)


def quote_identifier(name: str) -> str:
    return _utils.quote_identifier(name, "`")


def write_param_placeholder(w: StringIO, param_index: int) -> None:
    w.write("?")


def format_path(path: Path) -> str:
    """Rebuild a MySQL path string such as ``$.b.c[1].d``.

    Keys are written verbatim, so quoted keys keep their quotes.
    """
    out = ["$"]
    for seg in path:
        if isinstance(seg, Index):
            out.append(str(seg))
        else:
            out.append(f".{seg.name}")
    return "".join(out)


def write_value_path(
    w: StringIO, column: str, path: Path, opts: PathOptions
) -> None:
    if opts.cast:
        # No CAST form is defined for MySQL JSON extraction.
        logger.debug("ignoring cast to %r for mysql column %r", opts.cast, column)
    if opts.unquote:
        w.write("JSON_UNQUOTE(")
    w.write(f'JSON_EXTRACT({quote_identifier(column)}, "{format_path(path)}")')
    if opts.unquote:
        w.write(")")
