# Fábrica - Crea el DataAccessService con todas las dependencias inyectadas

from typing import Optional

from config.settings import PaginationSettings, settings
from adapters.outbound.database.sqlserver import SQLServerConnection
from core.services.connection_manager import ConnectionManager, Connector
from core.services.data_access import DataAccessService
from core.services.paginated_query import PaginatedQueryBuilder
from core.services.schema_introspector import SchemaIntrospector
from core.services.type_coercion import TypeCoercionPipeline
from core.services.update_executor import UpdateExecutor
from core.security.identifier_validator import IdentifierValidator


class DependencyContainer:
    """Contenedor de dependencias. Crea e inyecta todas las dependencias concretas."""

    def __init__(
        self,
        connector: Optional[Connector] = None,
        pagination: Optional[PaginationSettings] = None,
    ):
        self.connector = connector or SQLServerConnection.open
        self.pagination = pagination or settings.pagination
        self._validator = None
        self._introspector = None

    @property
    def validator(self) -> IdentifierValidator:
        if self._validator is None:
            self._validator = IdentifierValidator(self.pagination.default_schema)
        return self._validator

    @property
    def introspector(self) -> SchemaIntrospector:
        if self._introspector is None:
            self._introspector = SchemaIntrospector(self.validator)
        return self._introspector

    def create_service(self) -> DataAccessService:
        return DataAccessService(
            connections=ConnectionManager(self.connector),
            introspector=self.introspector,
            pages=PaginatedQueryBuilder(
                self.validator,
                self.introspector,
                TypeCoercionPipeline(),
                timestamp_column=self.pagination.timestamp_column,
            ),
            updater=UpdateExecutor(self.validator),
        )


def create_service(connector: Optional[Connector] = None) -> DataAccessService:
    """Factory function que crea el servicio con todas las dependencias."""
    return DependencyContainer(connector).create_service()

