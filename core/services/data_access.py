# Servicio de acceso a datos: superficie de operaciones para la capa de comandos

import logging
from typing import List

from core.domain.connection import ConnectionParams
from core.domain.query import QueryResult
from core.services.connection_manager import ConnectionManager
from core.services.paginated_query import PaginatedQueryBuilder
from core.services.schema_introspector import SchemaIntrospector
from core.services.update_executor import UpdateExecutor

logger = logging.getLogger(__name__)


class DataAccessService:
    """
    Orquesta las operaciones sobre la conexión única.

    Cada operación corre completa dentro de `ConnectionManager.session()`,
    así que nunca se intercalan sub-consultas de operaciones distintas.
    """

    def __init__(
        self,
        connections: ConnectionManager,
        introspector: SchemaIntrospector,
        pages: PaginatedQueryBuilder,
        updater: UpdateExecutor,
    ):
        self.connections = connections
        self.introspector = introspector
        self.pages = pages
        self.updater = updater

    @property
    def is_connected(self) -> bool:
        return self.connections.is_connected

    async def connect(self, params: ConnectionParams) -> None:
        await self.connections.connect(params)

    async def disconnect(self) -> None:
        await self.connections.disconnect()

    async def list_tables(self) -> List[str]:
        async with self.connections.session() as conn:
            return await self.introspector.list_tables(conn)

    async def list_columns(self, table: str) -> List[str]:
        async with self.connections.session() as conn:
            return await self.introspector.list_columns(conn, table)

    async def fetch_page(self, table: str, page: int, page_size: int) -> QueryResult:
        async with self.connections.session() as conn:
            return await self.pages.fetch_page(conn, table, page, page_size)

    async def update_cell(
        self, table: str, pk_column: str, pk_value: str, column: str, value: str
    ) -> int:
        async with self.connections.session() as conn:
            return await self.updater.update_cell(
                conn, table, pk_column, pk_value, column, value
            )
