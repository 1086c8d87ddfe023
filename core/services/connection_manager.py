# Gestor de la conexión única: estado Disconnected/Connected protegido por un lock

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

from core.domain.connection import ConnectionParams, ConnectionState
from core.domain.errors import NotConnectedError
from core.ports.database_port import DatabaseConnection

logger = logging.getLogger(__name__)

Connector = Callable[[ConnectionParams], Awaitable[DatabaseConnection]]


class ConnectionManager:
    """
    Dueño del único handle de conexión.

    El protocolo del servidor no admite peticiones concurrentes sobre un
    mismo socket, así que toda operación (incluido `connect`) toma el lock
    completo; los llamadores concurrentes esperan su turno.
    """

    def __init__(self, connector: Connector):
        self._connector = connector
        self._lock = asyncio.Lock()
        self._handle: Optional[DatabaseConnection] = None
        self._params: Optional[ConnectionParams] = None

    @property
    def state(self) -> ConnectionState:
        if self._handle is None:
            return ConnectionState.DISCONNECTED
        return ConnectionState.CONNECTED

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    @property
    def params(self) -> Optional[ConnectionParams]:
        return self._params

    async def connect(self, params: ConnectionParams) -> DatabaseConnection:
        """
        Abre una conexión nueva y reemplaza la anterior.

        Espera a que termine la operación en curso antes del reemplazo. Si la
        conexión nueva falla, la anterior queda intacta.

        Raises:
            ConnectionFailedError: fallo de red o autenticación
        """
        async with self._lock:
            logger.info(f"Conectando a {params.address}/{params.database} como {params.user}")
            handle = await self._connector(params)

            previous, self._handle = self._handle, handle
            self._params = params
            if previous is not None:
                await self._close_quietly(previous)

            logger.info(f"Conectado a {params.address}/{params.database}")
            return handle

    async def disconnect(self) -> None:
        async with self._lock:
            previous, self._handle = self._handle, None
            self._params = None
            if previous is not None:
                await self._close_quietly(previous)
                logger.info("Conexión cerrada")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[DatabaseConnection]:
        """Acceso exclusivo al handle durante una operación lógica completa"""
        async with self._lock:
            if self._handle is None:
                raise NotConnectedError()
            yield self._handle

    async def _close_quietly(self, handle: DatabaseConnection) -> None:
        # el handle viejo ya no está en uso; un fallo al cerrarlo no invalida el nuevo
        try:
            await handle.close()
        except Exception as e:
            logger.warning(f"Error al cerrar la conexión anterior: {e}")
