# Rutas de tablas - /tables, /tables/{table}/rows

import logging
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from adapters.inbound.dependencies import get_service_dep
from config.settings import settings
from core.domain.responses import (
    APIResponse,
    ColumnData,
    PageData,
    TablesData,
    UpdateData,
)
from core.services.data_access import DataAccessService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tables", tags=["Tables"])


class UpdateRequest(BaseModel):
    pk_column: str = Field(..., min_length=1)
    pk_value: str
    column: str = Field(..., min_length=1)
    value: str


@router.get("", response_model=APIResponse[TablesData])
async def list_tables(service: DataAccessService = Depends(get_service_dep)):
    """Lista las tablas como "schema.tabla" """
    tables = await service.list_tables()
    return APIResponse.ok(TablesData(tables=tables))


@router.get("/{table}/rows", response_model=APIResponse[PageData])
async def fetch_page(
    table: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(
        settings.pagination.default_page_size,
        ge=1,
        le=settings.pagination.max_page_size,
    ),
    service: DataAccessService = Depends(get_service_dep),
):
    """Página de filas con valores normalizados"""
    result = await service.fetch_page(table, page, page_size)
    body = result.to_dict()
    return APIResponse.ok(
        PageData(
            columns=[ColumnData(**c) for c in body["columns"]],
            rows=body["rows"],
            total=body["total"],
            page=page,
            page_size=page_size,
        )
    )


@router.patch("/{table}/rows", response_model=APIResponse[UpdateData])
async def update_cell(
    table: str,
    request: UpdateRequest,
    service: DataAccessService = Depends(get_service_dep),
):
    """Actualiza una celda identificada por su clave primaria"""
    affected = await service.update_cell(
        table, request.pk_column, request.pk_value, request.column, request.value
    )
    return APIResponse.ok(UpdateData(affected=affected))
