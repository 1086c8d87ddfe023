# Paquete de rutas - Módulos APIRouter

from adapters.inbound.routes.connection import router as connection_router
from adapters.inbound.routes.health import router as health_router
from adapters.inbound.routes.tables import router as tables_router

__all__ = ["connection_router", "health_router", "tables_router"]
