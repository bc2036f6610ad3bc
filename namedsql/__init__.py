"""namedsql – raw SQL with named placeholders.

Write ``$name`` instead of ``$1``; namedsql rewrites the query to positional
placeholders, checks that the supplied parameters match the placeholders
exactly, and maps result rows to string-keyed dicts.

Public API
----------
``compile_sql``
    Rewrite ``$name`` placeholders to positional markers.

``validate_and_order``
    Check a parameter set against a compiled query and return the values in
    positional order.

``run``
    Execute a compiled query through a database collaborator and map rows.

``NamedSQL``
    Repository wrapper with the call-time (``named_sql``) and ahead-of-use
    (``prepare``) entry points.

Extensibility
-------------
New positional marker styles can be registered via::

    from namedsql.compile.registry import register_marker_style

    @register_marker_style
    class OracleCompiler(PlaceholderCompiler):
        ...
"""

from __future__ import annotations

from namedsql.compile import (
    CompiledQuery,
    PlaceholderCompiler,
    PostgresCompiler,
    QueryBuilder,
    SQLiteCompiler,
    compile_sql,
    extract_placeholders,
    marker_styles,
    register_marker_style,
)
from namedsql.errors import (
    AdditionalParameterError,
    CompilationError,
    DuplicateParameterError,
    InternalInvariantError,
    MalformedInputError,
    MissingParameterError,
    NamedSQLError,
    ParameterError,
    QueryExecutionError,
    ReservedPlaceholderError,
)
from namedsql.execute import (
    Database,
    DBAPIDatabase,
    SQLAlchemyDatabase,
    default_row_mapper,
    map_rows,
    run,
)
from namedsql.repo import NamedSQL, PreparedQuery, named_sql
from namedsql.schema import (
    RESERVED_OPTION_NAMES,
    ExecutionOptions,
    ParameterSet,
    QueryResult,
)
from namedsql.validate import ParameterValidator, validate_and_order

__all__ = [
    # Core pipeline
    "compile_sql",
    "validate_and_order",
    "run",
    "named_sql",
    # Repository
    "NamedSQL",
    "PreparedQuery",
    # Compilation
    "CompiledQuery",
    "marker_styles",
    "register_marker_style",
    "PlaceholderCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
    "QueryBuilder",
    "extract_placeholders",
    # Validation
    "ParameterValidator",
    # Schema types
    "RESERVED_OPTION_NAMES",
    "ExecutionOptions",
    "ParameterSet",
    "QueryResult",
    # Execution
    "Database",
    "DBAPIDatabase",
    "SQLAlchemyDatabase",
    "default_row_mapper",
    "map_rows",
    # Errors
    "NamedSQLError",
    "CompilationError",
    "ReservedPlaceholderError",
    "ParameterError",
    "MissingParameterError",
    "AdditionalParameterError",
    "DuplicateParameterError",
    "MalformedInputError",
    "InternalInvariantError",
    "QueryExecutionError",
]
