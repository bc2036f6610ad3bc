"""Reserved execution options and the per-call ParameterSet.

Callers pass SQL parameters and a handful of reserved options through the
same keyword arguments / mapping.  The reserved names are fixed here and are
never treated as SQL parameters; they also may not be used as placeholder
names inside SQL text:

``result_mapper``
    Caller-supplied row transform.  Receives each row as a list of values in
    column order; its return value is used as-is.
``timeout``
    Passed through to the database collaborator.
``log``
    Passed through to the database collaborator.  ``True`` also makes the
    executor log the statement at INFO level.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from namedsql.errors import DuplicateParameterError, MalformedInputError

#: Option names that are never SQL parameters.
RESERVED_OPTION_NAMES: frozenset[str] = frozenset({"result_mapper", "timeout", "log"})

#: ``row values -> output value``
ResultMapper = Callable[[list[Any]], Any]


class ExecutionOptions(BaseModel):
    """Reserved options stripped out of a caller's parameters.

    Attributes:
        result_mapper: Optional row transform replacing the default
            column -> value dict.
        timeout: Seconds, forwarded to the database collaborator.
        log: Forwarded to the database collaborator.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    result_mapper: ResultMapper | None = None
    timeout: float | None = Field(default=None, gt=0)
    log: bool | None = None


class ParameterSet(BaseModel):
    """Caller-supplied input for one execution.

    Always built through :meth:`from_options` in library code, which performs
    the shape, duplicate and reserved-name handling.

    Attributes:
        params: SQL parameter name -> opaque value.
        options: Reserved options found in the caller's input.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    params: dict[str, Any] = Field(default_factory=dict)
    options: ExecutionOptions = Field(default_factory=ExecutionOptions)

    @classmethod
    def from_options(cls, opts: Any) -> "ParameterSet":
        """Split raw caller input into SQL parameters and reserved options.

        ``opts`` may be a mapping or an association list of ``(name, value)``
        pairs.  Association lists can carry the same name twice, which is
        reported as a :class:`DuplicateParameterError`.

        Args:
            opts: The caller's parameters and options.

        Returns:
            A ``ParameterSet`` whose ``params`` contain no reserved names.

        Raises:
            MalformedInputError: If ``opts`` is not a name -> value container,
                a key is not a string, or a reserved option has a bad value.
            DuplicateParameterError: If a name appears more than once.
        """
        pairs = parameter_pairs(opts)

        dupes = duplicate_names(name for name, _ in pairs)
        if dupes:
            raise DuplicateParameterError(dupes)

        params: dict[str, Any] = {}
        reserved: dict[str, Any] = {}
        for name, value in pairs:
            if name in RESERVED_OPTION_NAMES:
                reserved[name] = value
            else:
                params[name] = value

        try:
            options = ExecutionOptions.model_validate(reserved)
        except PydanticValidationError as exc:
            raise MalformedInputError(
                f"named_sql: invalid reserved options: {exc}", received=reserved
            ) from exc
        return cls(params=params, options=options)

    @property
    def names(self) -> list[str]:
        """SQL parameter names, in the caller's order."""
        return list(self.params)


def duplicate_names(names: Any) -> list[str]:
    """Return every name occurring more than once, in first-seen order."""
    counts = Counter(names)
    return [name for name, n in counts.items() if n > 1]


def parameter_pairs(opts: Any) -> list[tuple[str, Any]]:
    """Return ``opts`` as ``(name, value)`` pairs, repeats preserved.

    Raises:
        MalformedInputError: If ``opts`` is neither a mapping nor a sequence
            of pairs, or a name is not a string.
    """
    if opts is None:
        return []
    if isinstance(opts, Mapping):
        pairs = list(opts.items())
    elif isinstance(opts, (list, tuple)):
        pairs = []
        for item in opts:
            if not (isinstance(item, (list, tuple)) and len(item) == 2):
                raise MalformedInputError(
                    f"named_sql expects a mapping or a list of (name, value) pairs, "
                    f"got: {opts!r}",
                    received=opts,
                )
            pairs.append((item[0], item[1]))
    else:
        raise MalformedInputError(
            f"named_sql expects a mapping or a list of (name, value) pairs, got: {opts!r}",
            received=opts,
        )

    bad_keys = [name for name, _ in pairs if not isinstance(name, str)]
    if bad_keys:
        raise MalformedInputError(
            f"named_sql expects string parameter names, got: {bad_keys!r}",
            received=opts,
        )
    return pairs
