"""Unit tests for NamedSQL: call-time and ahead-of-use entry points."""
from __future__ import annotations

import pytest

from namedsql import NamedSQL, named_sql
from namedsql.errors import (
    AdditionalParameterError,
    DuplicateParameterError,
    MalformedInputError,
    MissingParameterError,
    ReservedPlaceholderError,
)


# ---------------------------------------------------------------------------
# Call-time path
# ---------------------------------------------------------------------------


def test_rewrites_named_params_to_positional(repo):
    [row] = repo.named_sql("SELECT $b, $a, $b", a=1, b=2)
    assert row["a"] == "SELECT $1, $2, $1"
    assert row["b"] == [2, 1]


def test_mapping_opts(repo):
    [row] = repo.named_sql("SELECT $id", {"id": 123})
    assert row == {"a": "SELECT $1", "b": [123]}


def test_runtime_missing_and_additional(repo):
    with pytest.raises(MissingParameterError, match="missing keys"):
        repo.named_sql("SELECT $id", [])
    with pytest.raises(AdditionalParameterError, match="additional keys"):
        repo.named_sql("SELECT $id", id=1, extra=2)


def test_duplicates_across_opts_and_kwargs(repo):
    with pytest.raises(DuplicateParameterError):
        repo.named_sql("SELECT $id", {"id": 1}, id=2)


def test_malformed_opts(repo):
    with pytest.raises(MalformedInputError):
        repo.named_sql("SELECT $id", 7)


def test_respects_result_mapper(repo):
    result = repo.named_sql(
        "SELECT $id",
        id=9,
        result_mapper=lambda row: {"sql": row[0], "params": row[1]},
    )
    assert result == [{"sql": "SELECT $1", "params": [9]}]


def test_timeout_and_log_reach_database(repo, echo_db):
    repo.named_sql("SELECT $id", id=1, timeout=2, log=True)
    assert echo_db.calls[0]["timeout"] == 2.0
    assert echo_db.calls[0]["log"] is True
    assert echo_db.calls[0]["params"] == [1]


def test_reserved_placeholder_fails_before_parameter_checks(repo, echo_db):
    with pytest.raises(ReservedPlaceholderError):
        repo.named_sql("SELECT $result_mapper", result_mapper=lambda row: row)
    assert echo_db.calls == []


def test_parameters_named_like_method_arguments(repo):
    [row] = repo.named_sql("SELECT $query, $opts", query="q", opts="o")
    assert row["b"] == ["q", "o"]


def test_sqlite_target(echo_db):
    repo = NamedSQL(echo_db, target="sqlite")
    [row] = repo.named_sql("SELECT $b, $a, $b", a=1, b=2)
    assert row["a"] == "SELECT ?1, ?2, ?1"


def test_module_level_named_sql(echo_db):
    [row] = named_sql(echo_db, "SELECT $x", x=5)
    assert row == {"a": "SELECT $1", "b": [5]}


# ---------------------------------------------------------------------------
# Ahead-of-use path
# ---------------------------------------------------------------------------


def test_prepare_then_call(repo):
    query = repo.prepare("SELECT $b, $a, $b", "a", "b")
    assert query.sql == "SELECT $1, $2, $1"
    assert query.param_names == ("b", "a")
    [row] = query(a=1, b=2)
    assert row["b"] == [2, 1]


def test_prepare_fails_for_missing_names(repo, echo_db):
    with pytest.raises(MissingParameterError):
        repo.prepare("SELECT $id")
    with pytest.raises(MissingParameterError):
        repo.prepare("SELECT $id, $name", "id")
    assert echo_db.calls == []


def test_prepare_fails_for_additional_names(repo):
    with pytest.raises(AdditionalParameterError):
        repo.prepare("SELECT $id", "id", "extra")


def test_prepare_fails_for_duplicate_names(repo):
    with pytest.raises(DuplicateParameterError):
        repo.prepare("SELECT $id", "id", "id")


def test_prepare_fails_for_reserved_placeholder(repo):
    with pytest.raises(ReservedPlaceholderError, match="reserved parameter names"):
        repo.prepare("SELECT $result_mapper", "result_mapper")


def test_prepare_ignores_reserved_option_names(repo):
    query = repo.prepare("SELECT $id", "id", "result_mapper")
    assert query(id=1, result_mapper=lambda row: row[1]) == [[1]]


def test_prepared_call_revalidates_values(repo):
    query = repo.prepare("SELECT $id", "id")
    with pytest.raises(AdditionalParameterError):
        query(id=1, other=2)
    with pytest.raises(MissingParameterError):
        query()


def test_prepared_repr(repo):
    assert repr(repo.prepare("SELECT $id", "id")) == "PreparedQuery('SELECT $id')"


def test_falsy_result_mapper_reaches_rows(repo):
    class EmptySized:
        def __len__(self):
            return 0

        def __call__(self, row):
            return row[1]

    assert repo.named_sql("SELECT $id", id=4, result_mapper=EmptySized()) == [[4]]
