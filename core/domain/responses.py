# Modelos de respuesta estandarizados para la API

from typing import TYPE_CHECKING, Any, Generic, List, Optional, TypeVar
from pydantic import BaseModel

if TYPE_CHECKING:
    from core.domain.errors import DataAccessError

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Detalle de error para respuestas"""

    code: str
    message: str
    details: Optional[dict] = None


class APIResponse(BaseModel, Generic[T]):
    """Respuesta estándar de la API"""

    success: bool
    data: Optional[T] = None
    error: Optional[ErrorDetail] = None

    @classmethod
    def ok(cls, data: T = None) -> "APIResponse[T]":
        """Crea respuesta exitosa"""
        return cls(success=True, data=data)

    @classmethod
    def from_exception(cls, exc: "DataAccessError") -> "APIResponse[None]":
        """Crea respuesta desde excepción DataAccessError"""
        return cls(
            success=False,
            error=ErrorDetail(
                code=exc.code, message=exc.message, details=exc.details
            ),
        )


# DTOs específicos para cada endpoint


class ConnectData(BaseModel):
    """Resultado de una conexión"""

    status: str
    database: str


class TablesData(BaseModel):
    tables: List[str]


class ColumnData(BaseModel):
    name: str
    type: str


class PageData(BaseModel):
    """Página de filas con valores ya normalizados"""

    columns: List[ColumnData]
    rows: List[List[Any]]
    total: int
    page: int
    page_size: int


class UpdateData(BaseModel):
    affected: int


class HealthData(BaseModel):
    """Datos de health check"""

    status: str
    connected: bool
