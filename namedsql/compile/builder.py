"""Named placeholder -> positional placeholder compilation.

``QueryBuilder`` scans SQL text for ``$name`` tokens, assigns each distinct
name a 1-based index in first-occurrence order, and rewrites every token to
the dialect's positional marker.  Dialect-specific rendering is delegated to
the injected ``PlaceholderCompiler``.

Scanning is lexical: any ``$`` followed by an identifier is a placeholder,
including inside string literals and comments.  ``$1foo`` is not an
identifier and is left untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from namedsql.compile.base import CompiledQuery, PlaceholderCompiler
from namedsql.compile.registry import compiler_for
from namedsql.errors import MalformedInputError, ReservedPlaceholderError
from namedsql.schema.options import RESERVED_OPTION_NAMES

#: ``$`` followed by a letter or underscore, then letters, digits, ``_`` or ``-``.
PLACEHOLDER_PATTERN = re.compile(r"\$(?P<name>[A-Za-z_][A-Za-z0-9_-]*)")


@dataclass(frozen=True)
class Placeholder:
    """One ``$name`` occurrence in the source SQL.

    Attributes:
        name: The identifier without the ``$``.
        start: Offset of the ``$``.
        end: Offset just past the identifier.
    """

    name: str
    start: int
    end: int


def extract_placeholders(sql: str) -> list[Placeholder]:
    """Return every placeholder occurrence in ``sql``, repeats included."""
    return [
        Placeholder(m.group("name"), m.start(), m.end())
        for m in PLACEHOLDER_PATTERN.finditer(sql)
    ]


class QueryBuilder:
    """Compiles SQL with named placeholders to positional SQL.

    Args:
        compiler: Dialect-specific marker renderer.
        reserved: Names that may not appear as placeholders.
    """

    def __init__(
        self,
        compiler: PlaceholderCompiler,
        reserved: frozenset[str] = RESERVED_OPTION_NAMES,
    ) -> None:
        self._compiler = compiler
        self._reserved = reserved

    def build(self, sql: str) -> CompiledQuery:
        """Compile ``sql`` and return an immutable :class:`CompiledQuery`.

        Args:
            sql: SQL text with ``$name`` placeholders.

        Returns:
            The normalized SQL together with the expected and ordered names.

        Raises:
            MalformedInputError: If ``sql`` is not a string.
            ReservedPlaceholderError: If a placeholder uses a reserved name.
        """
        if not isinstance(sql, str):
            raise MalformedInputError(
                f"named_sql expects the query to be a string, got: {sql!r}",
                received=sql,
            )

        occurrences = extract_placeholders(sql)

        bad_reserved = [p.name for p in occurrences if p.name in self._reserved]
        if bad_reserved:
            raise ReservedPlaceholderError(bad_reserved, self._reserved, sql=sql)

        indices: dict[str, int] = {}
        for p in occurrences:
            if p.name not in indices:
                indices[p.name] = len(indices) + 1

        return CompiledQuery(
            normalized_sql=self._rewrite(sql, occurrences, indices),
            expected_names=frozenset(indices),
            ordered_names=tuple(indices),
            dialect=self._compiler.dialect_name,
            source_sql=sql,
        )

    def _rewrite(
        self,
        sql: str,
        occurrences: list[Placeholder],
        indices: dict[str, int],
    ) -> str:
        # Splice by matched span so $id never touches $identifier.
        parts: list[str] = []
        last_end = 0
        for p in occurrences:
            parts.append(sql[last_end:p.start])
            parts.append(self._compiler.positional_marker(indices[p.name]))
            last_end = p.end
        parts.append(sql[last_end:])
        return "".join(parts)


def compile_sql(sql: str, target: str = "postgres") -> CompiledQuery:
    """Compile ``sql`` with the marker style registered as ``target``.

    Example::

        compiled = compile_sql("SELECT $b, $a, $b")
        compiled.normalized_sql   # 'SELECT $1, $2, $1'
        compiled.ordered_names    # ('b', 'a')

    Raises:
        CompilationError: If no marker style is registered as ``target``.
        ReservedPlaceholderError: If a placeholder uses a reserved name.
    """
    return QueryBuilder(compiler_for(target)).build(sql)
