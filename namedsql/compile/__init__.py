"""namedsql compilation layer: named placeholders -> positional SQL."""
from namedsql.compile.base import CompiledQuery, PlaceholderCompiler
from namedsql.compile.builder import QueryBuilder, compile_sql, extract_placeholders
from namedsql.compile.postgres import PostgresCompiler
from namedsql.compile.registry import (
    compiler_for,
    marker_styles,
    register_marker_style,
    unregister_marker_style,
)
from namedsql.compile.sqlite import SQLiteCompiler

register_marker_style(PostgresCompiler)
register_marker_style(SQLiteCompiler)

__all__ = [
    "CompiledQuery",
    "PlaceholderCompiler",
    "QueryBuilder",
    "compile_sql",
    "extract_placeholders",
    "compiler_for",
    "marker_styles",
    "register_marker_style",
    "unregister_marker_style",
    "PostgresCompiler",
    "SQLiteCompiler",
]
