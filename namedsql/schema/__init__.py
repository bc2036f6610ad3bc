"""namedsql schema models: execution options, parameter sets, query results."""
from namedsql.schema.options import (
    RESERVED_OPTION_NAMES,
    ExecutionOptions,
    ParameterSet,
    ResultMapper,
)
from namedsql.schema.result import QueryResult

__all__ = [
    "RESERVED_OPTION_NAMES",
    "ExecutionOptions",
    "ParameterSet",
    "ResultMapper",
    "QueryResult",
]
