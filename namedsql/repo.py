"""Repository wrapper binding namedsql to a database collaborator.

``NamedSQL`` offers the two entry points of the library.  Both run the same
compilation and validation; they differ only in *when* errors surface.

Ahead-of-use (``prepare``)
    The query text and the parameter *names* are given when the query is
    defined, typically at module import time.  Reserved placeholders and
    missing / additional / duplicate names fail right there, before any
    caller can reach the query::

        repo = NamedSQL(DBAPIDatabase(conn), target="sqlite")

        get_user = repo.prepare("SELECT * FROM users WHERE id = $id", "id")
        rows = get_user(id=42)

Call-time (``named_sql``)
    Query and values are given together and validated on each call::

        rows = repo.named_sql("SELECT * FROM users WHERE id = $id", id=42)
        rows = repo.named_sql(query, {"id": 42, "result_mapper": tuple})
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from namedsql.compile.base import CompiledQuery
from namedsql.compile.builder import compile_sql
from namedsql.execute.database import Database
from namedsql.execute.executor import run
from namedsql.schema.options import RESERVED_OPTION_NAMES, ParameterSet, parameter_pairs
from namedsql.validate.validator import ParameterValidator


class NamedSQL:
    """Runs named-placeholder SQL against one database collaborator.

    Args:
        database: Anything satisfying :class:`~namedsql.execute.Database`.
        target: Compiler target deciding the positional marker style
            (``'postgres'`` -> ``$1``, ``'sqlite'`` -> ``?1``).
    """

    def __init__(self, database: Database, target: str = "postgres") -> None:
        self.database = database
        self.target = target

    def named_sql(self, query: str, opts: Any = None, /, **kwargs: Any) -> list[Any]:
        """Compile, validate and execute ``query`` at call time.

        Parameters and reserved options may be passed as ``opts`` (a mapping
        or a list of ``(name, value)`` pairs), as keyword arguments, or both.

        Returns:
            One mapped value per result row.

        Raises:
            ReservedPlaceholderError: ``query`` uses a reserved name.
            ParameterError: (or subclass) the parameters do not match.
            QueryExecutionError: The database reported an error.
        """
        compiled = compile_sql(query, self.target)
        param_set = ParameterSet.from_options(_merge_opts(opts, kwargs))
        return self._execute(compiled, param_set)

    def prepare(self, query: str, *param_names: str) -> PreparedQuery:
        """Compile ``query`` and validate ``param_names`` immediately.

        Reserved option names in ``param_names`` are ignored, so a query can
        be declared with the options it will always be called with.

        Returns:
            A callable :class:`PreparedQuery`.

        Raises:
            ReservedPlaceholderError: ``query`` uses a reserved name.
            ParameterError: (or subclass) ``param_names`` do not match.
        """
        compiled = compile_sql(query, self.target)
        names = [n for n in param_names if n not in RESERVED_OPTION_NAMES]
        ParameterValidator(compiled).validate_names(names)
        return PreparedQuery(self, compiled)

    def _execute(self, compiled: CompiledQuery, param_set: ParameterSet) -> list[Any]:
        validator = ParameterValidator(compiled)
        validator.validate_names(param_set.names)
        arguments = validator.ordered_arguments(param_set.params)
        options = param_set.options
        return run(
            self.database,
            compiled,
            arguments,
            options.result_mapper,
            timeout=options.timeout,
            log=options.log,
        )


class PreparedQuery:
    """A query whose placeholders were validated when it was prepared.

    Values are still checked on every call with the same validator, so a
    call with the wrong names fails exactly like :meth:`NamedSQL.named_sql`.
    """

    def __init__(self, repo: NamedSQL, compiled: CompiledQuery) -> None:
        self._repo = repo
        self.compiled = compiled

    @property
    def sql(self) -> str:
        """The normalized, positional SQL."""
        return self.compiled.normalized_sql

    @property
    def param_names(self) -> tuple[str, ...]:
        return self.compiled.ordered_names

    def __call__(self, opts: Any = None, /, **kwargs: Any) -> list[Any]:
        param_set = ParameterSet.from_options(_merge_opts(opts, kwargs))
        return self._repo._execute(self.compiled, param_set)

    def __repr__(self) -> str:
        return f"PreparedQuery({self.compiled.source_sql!r})"


def named_sql(database: Database, query: str, opts: Any = None, /, **kwargs: Any) -> list[Any]:
    """One-off call-time execution against ``database`` with ``$n`` markers."""
    return NamedSQL(database).named_sql(query, opts, **kwargs)


def _merge_opts(opts: Any, kwargs: dict[str, Any]) -> Any:
    if opts is None:
        return kwargs
    if not kwargs:
        return opts
    # Keep repeats visible to the duplicate check.
    pairs: Iterable[tuple[str, Any]] = parameter_pairs(opts)
    return [*pairs, *kwargs.items()]
