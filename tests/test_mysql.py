"""MySQL renderer tests."""

import logging
from io import StringIO

from pysqljson.dialect import mysql
from pysqljson.jsonpath import Path, parse_path, path
from pysqljson.options import PathOptions


def _render(column, p, **opts):
    w = StringIO()
    mysql.write_value_path(w, column, p, PathOptions(**opts))
    return w.getvalue()


class TestMySQLFormatPath:
    def test_keys(self):
        assert mysql.format_path(path("a", "b")) == "$.a.b"

    def test_index_after_key(self):
        assert mysql.format_path(path("c", "[1]", "d")) == "$.c[1].d"

    def test_leading_index(self):
        assert mysql.format_path(path("[0]", "[1]")) == "$[0][1]"

    def test_quoted_key_verbatim(self):
        p = parse_path('b."c[1]".d[1][2].e')
        assert mysql.format_path(p) == '$.b."c[1]".d[1][2].e'

    def test_empty(self):
        assert mysql.format_path(Path()) == "$"


class TestMySQLValuePath:
    def test_extract(self):
        assert _render("a", parse_path("b.c")) == 'JSON_EXTRACT(`a`, "$.b.c")'

    def test_unquote(self):
        assert _render("a", parse_path("b"), unquote=True) == (
            'JSON_UNQUOTE(JSON_EXTRACT(`a`, "$.b"))'
        )

    def test_cast_is_ignored_and_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pysqljson.dialect.mysql"):
            assert _render("a", parse_path("b"), cast="int") == 'JSON_EXTRACT(`a`, "$.b")'
        assert "ignoring cast" in caplog.text


class TestMySQLPlaceholders:
    def test_positional(self):
        w = StringIO()
        mysql.write_param_placeholder(w, 3)
        assert w.getvalue() == "?"

    def test_quote_identifier(self):
        assert mysql.quote_identifier("t.c`x") == "`t`.`c``x`"
