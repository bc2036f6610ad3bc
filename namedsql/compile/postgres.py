"""PostgreSQL dialect compiler."""

from __future__ import annotations

from namedsql.compile.base import PlaceholderCompiler


class PostgresCompiler(PlaceholderCompiler):
    """Renders PostgreSQL positional markers.

    Parameter style: ``$1``, ``$2`` – the native server-side style used by
    ``asyncpg`` and by Ecto's ``Repo.query``.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def positional_marker(self, index: int) -> str:
        return f"${index}"
