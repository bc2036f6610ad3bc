"""Compiler abstractions: CompiledQuery and the PlaceholderCompiler ABC.

The Strategy pattern is used:
- ``compile_sql`` owns the algorithm (scan, reserved check, index
  assignment, span rewrite).
- ``PostgresCompiler`` and ``SQLiteCompiler`` only decide how a positional
  marker is rendered for a given 1-based index.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CompiledQuery:
    """The output of compiling one SQL string.

    Attributes:
        normalized_sql: The SQL with every ``$name`` replaced by the
            positional marker for its index.
        expected_names: Distinct placeholder names, for membership checks.
        ordered_names: Distinct placeholder names in first-occurrence order.
            Position ``i`` (1-based) matches marker ``i`` in
            ``normalized_sql``.
        dialect: The compiler target that rendered the markers.
        source_sql: The SQL text as written by the caller.
    """

    normalized_sql: str
    expected_names: frozenset[str]
    ordered_names: tuple[str, ...]
    dialect: str = "postgres"
    source_sql: str = ""

    @property
    def param_count(self) -> int:
        """Number of positional parameters the normalized SQL expects."""
        return len(self.ordered_names)


class PlaceholderCompiler(ABC):
    """Abstract base for dialect-specific positional marker rendering."""

    @abstractmethod
    def positional_marker(self, index: int) -> str:
        """Return the SQL marker for the positional parameter ``index``.

        Args:
            index: 1-based parameter position.

        Returns:
            Dialect-specific marker string (e.g. ``'$1'``).
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'postgres'`` or ``'sqlite'``)."""
