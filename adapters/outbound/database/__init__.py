# Adaptadores de base de datos - re-exports

from adapters.outbound.database.sqlserver import (
    SQLServerConnection,
    build_connection_string,
    open_pyodbc_connection,
)

__all__ = [
    "SQLServerConnection",
    "build_connection_string",
    "open_pyodbc_connection",
]
