# Servicios del núcleo
from core.services.connection_manager import ConnectionManager
from core.services.data_access import DataAccessService
from core.services.paginated_query import PaginatedQueryBuilder
from core.services.schema_introspector import SchemaIntrospector
from core.services.type_coercion import RawCell, TypeCoercionPipeline
from core.services.update_executor import UpdateExecutor

__all__ = [
    "ConnectionManager",
    "DataAccessService",
    "PaginatedQueryBuilder",
    "SchemaIntrospector",
    "RawCell",
    "TypeCoercionPipeline",
    "UpdateExecutor",
]
