"""Shared test fixtures."""

import pytest

from pysqljson.dialect import DialectName


@pytest.fixture
def pg_dialect():
    return DialectName.POSTGRESQL


@pytest.fixture
def mysql_dialect():
    return DialectName.MYSQL
