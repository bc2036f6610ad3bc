"""Execution of a compiled query and result-row mapping."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from namedsql.compile.base import CompiledQuery
from namedsql.errors import QueryExecutionError
from namedsql.execute.database import Database
from namedsql.schema.options import ResultMapper
from namedsql.schema.result import QueryResult

logger = logging.getLogger(__name__)


def default_row_mapper(columns: Sequence[str]) -> ResultMapper:
    """Return a mapper building a ``column -> value`` dict for each row.

    Repeated column names keep the last value, as ``dict(zip(...))`` does.
    A row whose length differs from ``columns`` raises ``ValueError``.
    """
    cols = list(columns)

    def mapper(row: list[Any]) -> dict[str, Any]:
        return dict(zip(cols, row, strict=True))

    return mapper


def map_rows(result: QueryResult, result_mapper: ResultMapper | None = None) -> list[Any]:
    """Apply ``result_mapper`` (or the default dict mapping) to every row."""
    mapper = default_row_mapper(result.columns) if result_mapper is None else result_mapper
    return [mapper(list(row)) for row in result.rows]


def run(
    database: Database,
    compiled: CompiledQuery,
    arguments: Sequence[Any],
    result_mapper: ResultMapper | None = None,
    *,
    timeout: float | None = None,
    log: bool | None = None,
) -> list[Any]:
    """Execute ``compiled`` with positional ``arguments`` and map the rows.

    Args:
        database: The database collaborator.
        compiled: The compiled query.
        arguments: Values in positional order, as returned by
            :func:`~namedsql.validate.validate_and_order`.
        result_mapper: Optional row transform.  Receives each row's values
            in column order; its return value is used verbatim.
        timeout: Passed through to ``database.execute``.
        log: Passed through to ``database.execute``; ``True`` also logs the
            statement at INFO level.

    Returns:
        One mapped value per row.

    Raises:
        QueryExecutionError: If the collaborator raises.  The original
            exception is available as ``original`` and ``__cause__``.
    """
    level = logging.INFO if log else logging.DEBUG
    logger.log(
        level,
        "named_sql executing %s with %d parameter(s)",
        compiled.normalized_sql,
        len(arguments),
    )

    try:
        result = database.execute(
            compiled.normalized_sql, list(arguments), timeout=timeout, log=log
        )
    except Exception as exc:
        raise QueryExecutionError(exc, compiled.normalized_sql) from exc

    return map_rows(result, result_mapper)
