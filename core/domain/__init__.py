# Core Domain - Entidades del motor de acceso a datos

from core.domain.connection import ConnectionParams, ConnectionState
from core.domain.query import QueryResult
from core.domain.schema import Column, TableRef
from core.domain.values import Row, Value, ValueKind
from core.domain.errors import (
    DataAccessError,
    ConnectionFailedError,
    NotConnectedError,
    ValidationError,
    InvalidIdentifierError,
    InvalidPageError,
    DatabaseError,
    QueryFailedError,
    ReadFailedError,
)

__all__ = [
    # Entidades
    "ConnectionParams",
    "ConnectionState",
    "QueryResult",
    "Column",
    "TableRef",
    "Row",
    "Value",
    "ValueKind",
    # Errores
    "DataAccessError",
    "ConnectionFailedError",
    "NotConnectedError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidPageError",
    "DatabaseError",
    "QueryFailedError",
    "ReadFailedError",
]
