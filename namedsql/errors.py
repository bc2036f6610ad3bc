"""Custom exception hierarchy for namedsql.

All public errors inherit from NamedSQLError so callers can catch the base
class for any namedsql-specific failure.  Errors caused by bad caller input
(reserved placeholders, parameter mismatches, malformed containers) also
inherit from ``ValueError``.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class NamedSQLError(Exception):
    """Base exception for all namedsql errors."""


class CompilationError(NamedSQLError):
    """Raised when a SQL string cannot be compiled.

    Args:
        message: Human-readable description.
        sql: The SQL text being compiled, when known.
    """

    def __init__(self, message: str, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql


class ReservedPlaceholderError(CompilationError, ValueError):
    """Raised when the SQL text uses a reserved option name as a placeholder.

    The query cannot be used until it is edited.
    """

    def __init__(
        self,
        names: Iterable[str],
        reserved: Iterable[str],
        sql: str | None = None,
    ) -> None:
        self.names = sorted(set(names))
        self.reserved = sorted(reserved)
        super().__init__(
            f"named_sql: query uses reserved parameter names: {self.names}. "
            f"Reserved: {self.reserved}",
            sql=sql,
        )


class ParameterError(NamedSQLError, ValueError):
    """Raised when a parameter set does not match the compiled query.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. MISSING_PARAMETER).
        details: Extra context about the offending names.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for an API payload."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class MissingParameterError(ParameterError):
    """Raised when names referenced by the query were not supplied."""

    def __init__(self, missing: list[str], expected: list[str]) -> None:
        super().__init__(
            f"named_sql: missing keys in params: {missing}. Expected: {expected}",
            code="MISSING_PARAMETER",
            details={"missing": missing, "expected": expected},
        )
        self.missing = missing
        self.expected = expected


class AdditionalParameterError(ParameterError):
    """Raised when supplied names are not referenced by the query."""

    def __init__(self, additional: list[str], expected: list[str]) -> None:
        super().__init__(
            f"named_sql: additional keys in params: {additional}. Expected: {expected}",
            code="ADDITIONAL_PARAMETER",
            details={"additional": additional, "expected": expected},
        )
        self.additional = additional
        self.expected = expected


class DuplicateParameterError(ParameterError):
    """Raised when the same parameter name is supplied more than once."""

    def __init__(self, duplicates: list[str]) -> None:
        super().__init__(
            f"named_sql: duplicate parameter keys: {duplicates}",
            code="DUPLICATE_PARAMETER",
            details={"duplicates": duplicates},
        )
        self.duplicates = duplicates


class MalformedInputError(ParameterError):
    """Raised when the parameter container is not a name -> value mapping."""

    def __init__(self, message: str, received: Any = None) -> None:
        super().__init__(
            message,
            code="MALFORMED_INPUT",
            details={"received_type": type(received).__name__},
        )


class InternalInvariantError(NamedSQLError):
    """Raised when a validated parameter set is missing a value.

    This signals a bug in namedsql, not bad caller input.
    """


class QueryExecutionError(NamedSQLError):
    """Raised when the database collaborator reports an error.

    The collaborator's exception is kept unmodified as ``original`` and as
    the exception's ``__cause__``.

    Args:
        original: The exception raised by the collaborator.
        sql: The positional SQL that was executed.
    """

    def __init__(self, original: BaseException, sql: str) -> None:
        super().__init__(f"named_sql: query execution failed: {original}")
        self.original = original
        self.sql = sql
