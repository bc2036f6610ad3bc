"""Parameter-set validation and positional ordering.

``ParameterValidator`` reconciles the names a compiled query expects with
the names a caller supplied.  Checks run in a fixed order and the first
failing category is raised, carrying every offending name of that category:

1. duplicates  – :class:`~namedsql.errors.DuplicateParameterError`
2. missing     – :class:`~namedsql.errors.MissingParameterError`
3. additional  – :class:`~namedsql.errors.AdditionalParameterError`

The same validator backs both the ahead-of-use path (``NamedSQL.prepare``)
and the call-time path (``NamedSQL.named_sql``).
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from namedsql.compile.base import CompiledQuery
from namedsql.errors import (
    AdditionalParameterError,
    DuplicateParameterError,
    InternalInvariantError,
    MissingParameterError,
)
from namedsql.schema.options import ParameterSet, duplicate_names, parameter_pairs


class ParameterValidator:
    """Validates supplied parameter names against a :class:`CompiledQuery`.

    Args:
        compiled: The compiled query whose names are expected.
    """

    def __init__(self, compiled: CompiledQuery) -> None:
        self._compiled = compiled

    def validate_names(self, provided_names: Iterable[str]) -> None:
        """Raise on the first failing check for ``provided_names``.

        Args:
            provided_names: Supplied names with reserved options already
                removed.  May contain repeats.

        Raises:
            DuplicateParameterError: A name was supplied more than once.
            MissingParameterError: An expected name was not supplied.
            AdditionalParameterError: A supplied name is not in the query.
        """
        provided = list(provided_names)
        expected = sorted(self._compiled.expected_names)

        dupes = duplicate_names(provided)
        if dupes:
            raise DuplicateParameterError(dupes)

        provided_set = set(provided)

        missing = [n for n in self._compiled.ordered_names if n not in provided_set]
        if missing:
            raise MissingParameterError(missing, expected)

        additional = [n for n in provided if n not in self._compiled.expected_names]
        if additional:
            raise AdditionalParameterError(additional, expected)

    def ordered_arguments(self, params: Mapping[str, Any]) -> list[Any]:
        """Return the values of ``params`` in positional order.

        Must only be called after :meth:`validate_names` succeeded.

        Raises:
            InternalInvariantError: If a name that passed validation has no
                value.
        """
        try:
            return [params[name] for name in self._compiled.ordered_names]
        except KeyError as exc:
            raise InternalInvariantError(
                f"named_sql: validated parameters have no value for {exc.args[0]!r}"
            ) from exc


def validate_and_order(
    compiled: CompiledQuery,
    provided: Any,
    reserved_options_stripped: bool = True,
) -> list[Any]:
    """Validate ``provided`` against ``compiled`` and return ordered arguments.

    Example::

        compiled = compile_sql("SELECT $b, $a, $b")
        validate_and_order(compiled, {"a": 1, "b": 2})   # [2, 1]

    Args:
        compiled: The compiled query.
        provided: A mapping, an association list of ``(name, value)`` pairs,
            or a :class:`ParameterSet`.
        reserved_options_stripped: ``True`` when ``provided`` holds SQL
            parameters only.  When ``False``, reserved options such as
            ``result_mapper`` are removed first.

    Returns:
        Parameter values aligned with the positional markers.

    Raises:
        MalformedInputError: ``provided`` is not a name -> value container.
        DuplicateParameterError: A name was supplied more than once.
        MissingParameterError: An expected name was not supplied.
        AdditionalParameterError: A supplied name is not in the query.
    """
    validator = ParameterValidator(compiled)

    if isinstance(provided, ParameterSet):
        pairs = list(provided.params.items())
    elif reserved_options_stripped:
        # Reserved names left in here are reported as additional parameters.
        pairs = parameter_pairs(provided)
    else:
        pairs = list(ParameterSet.from_options(provided).params.items())

    validator.validate_names(name for name, _ in pairs)
    return validator.ordered_arguments(dict(pairs))
