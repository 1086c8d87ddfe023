# Rutas de salud - /, /health

from fastapi import APIRouter, Depends

from adapters.inbound.dependencies import get_service_dep
from core.domain.responses import HealthData
from core.services.data_access import DataAccessService

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Root endpoint - status básico"""
    return {"status": "ok", "version": "1.0.0"}


@router.get("/health", response_model=HealthData)
async def health(service: DataAccessService = Depends(get_service_dep)):
    """Health check básico"""
    return HealthData(status="ok", connected=service.is_connected)
