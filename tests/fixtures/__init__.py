"""Test fixtures: in-memory database collaborators and sample DDL."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from namedsql.schema.result import QueryResult

_FIXTURES_DIR = Path(__file__).parent


class EchoDatabase:
    """Echoes back the executed SQL and params as a single ``a``/``b`` row.

    Also records every call so tests can inspect the pass-through options.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def execute(
        self,
        sql: str,
        params: Sequence[Any],
        *,
        timeout: float | None = None,
        log: bool | None = None,
    ) -> QueryResult:
        self.calls.append({"sql": sql, "params": list(params), "timeout": timeout, "log": log})
        return QueryResult(columns=["a", "b"], rows=[[sql, list(params)]])


class StaticDatabase:
    """Returns a fixed result regardless of the statement."""

    def __init__(self, columns: list[str], rows: list[list[Any]]) -> None:
        self.result = QueryResult(columns=columns, rows=rows)

    def execute(self, sql, params, *, timeout=None, log=None) -> QueryResult:
        return self.result


class FailingDatabase:
    """Raises the given exception on every call."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def execute(self, sql, params, *, timeout=None, log=None) -> QueryResult:
        raise self.exc


def load_ddl() -> str:
    """Return the sample SQLite DDL and seed data."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
