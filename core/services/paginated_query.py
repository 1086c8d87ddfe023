# Paginación: conteo + descubrimiento de columnas + página con ROW_NUMBER()

import logging
from typing import List

from core.domain.errors import InvalidPageError, QueryFailedError
from core.domain.query import QueryResult
from core.domain.schema import Column, TableRef
from core.ports.database_port import DatabaseConnection
from core.security.identifier_validator import IdentifierValidator
from core.services.schema_introspector import SchemaIntrospector
from core.services.type_coercion import TypeCoercionPipeline

logger = logging.getLogger(__name__)

ROWNUM_COLUMN = "__rownum__"
UNORDERED = "(SELECT NULL)"


class PaginatedQueryBuilder:
    """
    Compone las tres consultas de una página en una sola operación lógica.

    Las consultas se ejecutan en secuencia sobre la misma conexión; un fallo
    en cualquiera aborta la página completa.
    """

    def __init__(
        self,
        validator: IdentifierValidator,
        introspector: SchemaIntrospector,
        pipeline: TypeCoercionPipeline,
        timestamp_column: str = "exchangeTime",
    ):
        self.validator = validator
        self.introspector = introspector
        self.pipeline = pipeline
        self.timestamp_column = timestamp_column

    async def fetch_page(
        self, conn: DatabaseConnection, table: str, page: int, page_size: int
    ) -> QueryResult:
        if page < 1:
            raise InvalidPageError("page", page)
        if page_size < 1:
            raise InvalidPageError("page_size", page_size)

        ref = self.validator.parse_table(table)
        offset = (page - 1) * page_size

        total = await self.count(conn, ref)
        columns = await self.introspector.describe_columns(conn, ref)
        if not columns:
            raise QueryFailedError(f"No hay columnas visibles para {ref}")

        sql = self.build_page_sql(ref, columns)
        description, data = await conn.fetch(sql, (offset, offset + page_size))

        wire_types = [wire_type for _, wire_type in description]
        rows = [self.pipeline.decode_values(row, wire_types) for row in data]

        logger.info(
            f"{ref}: página {page} ({len(rows)} filas de {total}, tamaño {page_size})"
        )
        return QueryResult(columns=columns, rows=rows, total=total)

    async def count(self, conn: DatabaseConnection, ref: TableRef) -> int:
        sql = f"SELECT COUNT_BIG(*) FROM {self.validator.quote_table(ref)}"
        _, rows = await conn.fetch(sql)
        if not rows or rows[0][0] is None:
            return 0
        return int(rows[0][0])

    def order_clause(self, columns: List[Column]) -> str:
        """
        Orden estable para ROW_NUMBER(): columna de marca de tiempo descendente
        y clave primaria como desempate.
        """
        has_timestamp = any(c.name == self.timestamp_column for c in columns)
        keys = sorted(
            (c for c in columns if c.is_primary_key and c.name != self.timestamp_column),
            key=lambda c: c.primary_key_ordinal,
        )

        terms = [f"{self.validator.quote(c.name)} ASC" for c in keys]
        if has_timestamp:
            terms.insert(0, f"{self.validator.quote(self.timestamp_column)} DESC")

        if not terms:
            logger.warning(
                "Tabla sin clave primaria ni columna de tiempo: el orden de paginación no es estable"
            )
            return UNORDERED
        return ", ".join(terms)

    def build_page_sql(self, ref: TableRef, columns: List[Column]) -> str:
        projection = ", ".join(self.validator.quote(c.name) for c in columns)
        rownum = self.validator.quote(ROWNUM_COLUMN)
        return (
            f"SELECT {projection} FROM ("
            f"SELECT ROW_NUMBER() OVER (ORDER BY {self.order_clause(columns)}) AS {rownum}, * "
            f"FROM {self.validator.quote_table(ref)}"
            f") AS [__t__] "
            f"WHERE {rownum} > ? AND {rownum} <= ? "
            f"ORDER BY {rownum}"
        )
