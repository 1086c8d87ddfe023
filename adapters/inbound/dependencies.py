# Inyección de dependencias para FastAPI

import logging
from typing import Optional

from adapters.factory import create_service
from core.services.data_access import DataAccessService

logger = logging.getLogger(__name__)


class AppDependencies:
    """
    Singleton por proceso que guarda el DataAccessService.
    Todas las peticiones HTTP comparten su conexión única.
    """

    _instance: Optional["AppDependencies"] = None

    def __init__(self):
        self._service: Optional[DataAccessService] = None

    @classmethod
    def get_instance(cls) -> "AppDependencies":
        """Instancia compartida, creada en el primer uso"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Descarta la instancia (la conexión no se cierra aquí)"""
        cls._instance = None

    @property
    def service(self) -> DataAccessService:
        if self._service is None:
            self._service = create_service()
            logger.info("DataAccessService inicializado")
        return self._service


# Funciones para FastAPI Depends()

def get_deps() -> AppDependencies:
    """Obtiene el contenedor de dependencias"""
    return AppDependencies.get_instance()


def get_service_dep() -> DataAccessService:
    """Dependencia: DataAccessService"""
    return get_deps().service
