"""Raw result returned by a database collaborator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class QueryResult:
    """Columns and rows as reported by the database.

    Attributes:
        columns: Column names in select-list order.  Names may repeat.
        rows: Each row is a sequence of values aligned with ``columns``.
    """

    columns: list[str] = field(default_factory=list)
    rows: list[list[Any]] = field(default_factory=list)
