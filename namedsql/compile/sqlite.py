"""SQLite dialect compiler."""

from __future__ import annotations

from namedsql.compile.base import PlaceholderCompiler


class SQLiteCompiler(PlaceholderCompiler):
    """Renders SQLite numbered parameters.

    Parameter style: ``?1``, ``?2`` – SQLite binds ``?NNN`` to the NNN-th
    value of a positional sequence, so repeated names reuse one value just
    like ``$n`` on PostgreSQL.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def positional_marker(self, index: int) -> str:
        return f"?{index}"
