# Rutas de conexión - /connect

import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from adapters.inbound.dependencies import get_service_dep
from core.domain.connection import ConnectionParams
from core.domain.responses import APIResponse, ConnectData
from core.services.data_access import DataAccessService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Connection"])


class ConnectRequest(BaseModel):
    host: str = Field(..., min_length=1)
    port: int = Field(1433, ge=1, le=65535)
    user: str = Field(..., min_length=1)
    password: str = ""
    database: str = Field(..., min_length=1)


@router.post("/connect", response_model=APIResponse[ConnectData])
async def connect(
    request: ConnectRequest,
    service: DataAccessService = Depends(get_service_dep),
):
    """Abre la conexión única, reemplazando la anterior"""
    params = ConnectionParams(
        host=request.host,
        port=request.port,
        user=request.user,
        password=request.password,
        database=request.database,
    )
    await service.connect(params)
    return APIResponse.ok(ConnectData(status="connected", database=params.database))
