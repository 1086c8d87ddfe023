# Excepciones del motor de acceso a datos

from typing import Optional


class DataAccessError(Exception):
    """Excepción base para el motor de acceso a datos"""

    def __init__(self, message: str, code: str, details: dict = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class ConnectionFailedError(DataAccessError):
    """Fallo de red o autenticación al conectar"""

    def __init__(self, message: str, host: Optional[str] = None):
        super().__init__(
            message=message,
            code="CONNECTION_FAILED",
            details={"host": host} if host else {},
        )


class NotConnectedError(DataAccessError):
    """Operación sin conexión activa"""

    def __init__(self, message: str = "No hay conexión activa con la base de datos."):
        super().__init__(message=message, code="NOT_CONNECTED")


class ValidationError(DataAccessError):
    """Errores de validación de entrada"""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(
            message=message,
            code=code,
            details={"field": field} if field else {},
        )


class InvalidIdentifierError(ValidationError):
    """Nombre de schema, tabla o columna fuera de la lista blanca"""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Identificador inválido: {identifier!r}",
            field="identifier",
            code="INVALID_IDENTIFIER",
        )
        self.details["identifier"] = identifier
        self.identifier = identifier


class InvalidPageError(ValidationError):
    """Parámetros de paginación fuera de rango"""

    def __init__(self, field: str, value: int):
        super().__init__(
            message=f"{field} debe ser >= 1 (recibido: {value})",
            field=field,
            code="INVALID_PAGE",
        )


class DatabaseError(DataAccessError):
    """Errores devueltos por el servidor o el driver"""

    def __init__(self, message: str, code: str, query: str = None):
        super().__init__(
            message=message,
            code=code,
            details={"query": query[:100] if query else None},
        )


class QueryFailedError(DatabaseError):
    """El servidor rechazó o no pudo ejecutar la sentencia"""

    def __init__(self, message: str, query: str = None):
        super().__init__(message=message, code="QUERY_FAILED", query=query)


class ReadFailedError(DatabaseError):
    """No se pudo consumir el resultado tras ejecutar la sentencia"""

    def __init__(self, message: str, query: str = None):
        super().__init__(message=message, code="READ_FAILED", query=query)
