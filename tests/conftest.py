"""Shared pytest fixtures for namedsql unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from namedsql import NamedSQL
from tests.fixtures import EchoDatabase, load_ddl


@pytest.fixture()
def echo_db() -> EchoDatabase:
    return EchoDatabase()


@pytest.fixture()
def repo(echo_db: EchoDatabase) -> NamedSQL:
    """Repository over the echo database, PostgreSQL markers."""
    return NamedSQL(echo_db)


@pytest.fixture()
def sqlite_conn() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database seeded with the sample ``users`` table."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl())
    conn.commit()
    yield conn
    conn.close()
