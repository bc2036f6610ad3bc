"""Integration tests: compile → validate → execute against in-memory SQLite.

Runs through the stdlib ``sqlite3`` driver with ``?NNN`` numbered markers,
covering repeated names, prefix-colliding names, NULLs, result mappers,
the ahead-of-use path and driver errors.
"""
from __future__ import annotations

import sqlite3

import pytest

import namedsql
from namedsql import DBAPIDatabase, NamedSQL
from namedsql.errors import MissingParameterError, QueryExecutionError


@pytest.fixture()
def repo(sqlite_conn: sqlite3.Connection) -> NamedSQL:
    return NamedSQL(DBAPIDatabase(sqlite_conn), target="sqlite")


@pytest.mark.integration
def test_select_by_tenant(repo):
    rows = repo.named_sql(
        "SELECT id, name FROM users WHERE tenant_id = $tenant ORDER BY id",
        tenant="acme",
    )
    assert rows == [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]


@pytest.mark.integration
def test_repeated_placeholder_binds_one_value(repo):
    rows = repo.named_sql(
        "SELECT id FROM users WHERE tenant_id = $t OR name = $t ORDER BY id",
        t="beta",
    )
    assert [r["id"] for r in rows] == [3]


@pytest.mark.integration
def test_prefix_colliding_names(repo):
    rows = repo.named_sql(
        "SELECT id FROM users WHERE id = $id AND identifier = $identifier",
        id=2,
        identifier="B-2",
    )
    assert rows == [{"id": 2}]


@pytest.mark.integration
def test_order_of_values_follows_first_occurrence(repo):
    [row] = repo.named_sql("SELECT $b AS b, $a AS a, $b AS b2", a=1, b=2)
    assert row == {"b": 2, "a": 1, "b2": 2}


@pytest.mark.integration
def test_null_values_round_trip(repo):
    rows = repo.named_sql("SELECT email FROM users WHERE id = $id", id=2)
    assert rows == [{"email": None}]


@pytest.mark.integration
def test_duplicate_column_names_last_wins(repo):
    rows = repo.named_sql("SELECT id AS x, name AS x FROM users WHERE id = $id", id=1)
    assert rows == [{"x": "Alice"}]


@pytest.mark.integration
def test_result_mapper_gets_row_values(repo):
    rows = repo.named_sql(
        "SELECT id, name FROM users WHERE active = $active ORDER BY id",
        active=1,
        result_mapper=tuple,
    )
    assert rows == [(1, "Alice"), (3, "Cara")]


@pytest.mark.integration
def test_prepared_query(repo):
    by_email = repo.prepare("SELECT name FROM users WHERE email = $email", "email")
    assert by_email(email="cara@beta.com") == [{"name": "Cara"}]
    assert by_email(email="nobody@example.com") == []


@pytest.mark.integration
def test_validation_happens_before_execution(repo):
    with pytest.raises(MissingParameterError):
        repo.named_sql("DELETE FROM users WHERE id = $id")
    assert len(repo.named_sql("SELECT id FROM users WHERE 1 = $one", one=1)) == 3


@pytest.mark.integration
def test_write_statement_returns_no_rows(repo, sqlite_conn):
    rows = repo.named_sql("UPDATE users SET active = $active WHERE id = $id", active=0, id=1)
    assert rows == []
    assert sqlite_conn.execute("SELECT active FROM users WHERE id = 1").fetchone() == (0,)


@pytest.mark.integration
def test_driver_error_is_wrapped(repo):
    with pytest.raises(QueryExecutionError) as exc_info:
        repo.named_sql("SELECT * FROM missing_table WHERE id = $id", id=1)
    assert isinstance(exc_info.value.original, sqlite3.OperationalError)


@pytest.mark.integration
def test_low_level_pipeline(sqlite_conn):
    compiled = namedsql.compile_sql("SELECT name FROM users WHERE id IN ($x, $y)", "sqlite")
    args = namedsql.validate_and_order(compiled, {"y": 3, "x": 1})
    assert args == [1, 3]
    rows = namedsql.run(DBAPIDatabase(sqlite_conn), compiled, args, lambda row: row[0])
    assert sorted(rows) == ["Alice", "Cara"]
