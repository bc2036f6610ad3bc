"""namedsql execution layer: database collaborators and row mapping."""
from namedsql.execute.database import Database, DBAPIDatabase, SQLAlchemyDatabase
from namedsql.execute.executor import default_row_mapper, map_rows, run

__all__ = [
    "Database",
    "DBAPIDatabase",
    "SQLAlchemyDatabase",
    "default_row_mapper",
    "map_rows",
    "run",
]
