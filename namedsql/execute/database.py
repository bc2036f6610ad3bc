"""Database collaborators.

namedsql needs a single capability from a database: execute positional SQL
against an ordered list of values and return column names plus rows.  Any
object with a matching ``execute`` method satisfies :class:`Database`.

Two adapters are provided:

``DBAPIDatabase``
    Wraps a DB-API 2.0 connection such as ``sqlite3``.  Pair it
    with the compiler target whose markers the driver understands, e.g.
    ``target="sqlite"`` for ``sqlite3``.

``SQLAlchemyDatabase``
    Wraps a SQLAlchemy ``Engine`` or ``Connection`` and sends the statement
    through ``exec_driver_sql``.  Install the optional dependency first::

        pip install "namedsql[sqlalchemy]"
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from namedsql.schema.result import QueryResult

if TYPE_CHECKING:
    from sqlalchemy import Connection, Engine

logger = logging.getLogger(__name__)


@runtime_checkable
class Database(Protocol):
    """The database collaborator consumed by :func:`namedsql.run`."""

    def execute(
        self,
        sql: str,
        params: Sequence[Any],
        *,
        timeout: float | None = None,
        log: bool | None = None,
    ) -> QueryResult:
        """Execute ``sql`` with positional ``params`` and return all rows."""
        ...


class DBAPIDatabase:
    """Adapter for a DB-API 2.0 connection.

    DB-API has no per-statement timeout, so ``timeout`` is accepted and
    ignored; configure it on the connection instead.

    Args:
        connection: An open DB-API connection.
    """

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def execute(
        self,
        sql: str,
        params: Sequence[Any],
        *,
        timeout: float | None = None,
        log: bool | None = None,
    ) -> QueryResult:
        cursor = self._connection.cursor()
        try:
            cursor.execute(sql, tuple(params))
            if cursor.description is None:
                return QueryResult()
            columns = [d[0] for d in cursor.description]
            rows = [list(row) for row in cursor.fetchall()]
        finally:
            cursor.close()
        if log:
            logger.info("DB-API statement returned %d row(s)", len(rows))
        return QueryResult(columns=columns, rows=rows)


class SQLAlchemyDatabase:
    """Adapter for a SQLAlchemy ``Engine`` or ``Connection``.

    When given an engine, each call runs in its own ``engine.begin()``
    transaction.  When given a connection, the caller owns the transaction.
    ``timeout`` is forwarded as the ``timeout`` execution option for drivers
    that honour it; ``log`` is left to the executor.

    Args:
        bind: A SQLAlchemy engine or connection.
    """

    def __init__(self, bind: Engine | Connection) -> None:
        self._bind = bind

    def execute(
        self,
        sql: str,
        params: Sequence[Any],
        *,
        timeout: float | None = None,
        log: bool | None = None,
    ) -> QueryResult:
        from sqlalchemy import Engine

        if isinstance(self._bind, Engine):
            with self._bind.begin() as conn:
                return self._execute(conn, sql, params, timeout)
        return self._execute(self._bind, sql, params, timeout)

    @staticmethod
    def _execute(
        conn: Connection,
        sql: str,
        params: Sequence[Any],
        timeout: float | None,
    ) -> QueryResult:
        options: dict[str, Any] = {}
        if timeout is not None:
            options["timeout"] = timeout

        result = conn.exec_driver_sql(
            sql, tuple(params), execution_options=options or None
        )
        if not result.returns_rows:
            return QueryResult()
        columns = list(result.keys())
        rows = [list(row) for row in result.fetchall()]
        return QueryResult(columns=columns, rows=rows)
