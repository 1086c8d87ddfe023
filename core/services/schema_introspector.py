# Introspección de schema: tablas y columnas vía INFORMATION_SCHEMA

import logging
from typing import List, Union

from core.domain.schema import Column, TableRef
from core.ports.database_port import DatabaseConnection
from core.security.identifier_validator import IdentifierValidator

logger = logging.getLogger(__name__)

TABLES_SQL = """
    SELECT TABLE_SCHEMA, TABLE_NAME
    FROM INFORMATION_SCHEMA.TABLES
    WHERE TABLE_TYPE = 'BASE TABLE'
    ORDER BY TABLE_SCHEMA, TABLE_NAME
"""

COLUMNS_SQL = """
    SELECT c.COLUMN_NAME, c.DATA_TYPE, pk.ORDINAL_POSITION
    FROM INFORMATION_SCHEMA.COLUMNS c
    LEFT JOIN (
        SELECT kcu.COLUMN_NAME, kcu.ORDINAL_POSITION
        FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS tc
        JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE kcu
          ON kcu.CONSTRAINT_SCHEMA = tc.CONSTRAINT_SCHEMA
         AND kcu.CONSTRAINT_NAME = tc.CONSTRAINT_NAME
        WHERE tc.CONSTRAINT_TYPE = 'PRIMARY KEY'
          AND tc.TABLE_SCHEMA = ? AND tc.TABLE_NAME = ?
    ) pk ON pk.COLUMN_NAME = c.COLUMN_NAME
    WHERE c.TABLE_SCHEMA = ? AND c.TABLE_NAME = ?
    ORDER BY c.ORDINAL_POSITION
"""


class SchemaIntrospector:
    """Lista tablas y columnas; el orden lo define el servidor"""

    def __init__(self, validator: IdentifierValidator):
        self.validator = validator

    async def list_tables(self, conn: DatabaseConnection) -> List[str]:
        """Retorna "schema.tabla" ordenado por schema y luego por nombre"""
        _, rows = await conn.fetch(TABLES_SQL)

        tables = []
        for schema, name in rows:
            if not self._addressable(schema, name):
                logger.warning(f"Tabla omitida por nombre no direccionable: {schema}.{name}")
                continue
            tables.append(f"{schema}.{name}")

        logger.info(f"{len(tables)} tablas encontradas")
        return tables

    def _addressable(self, schema: str, name: str) -> bool:
        # un punto dentro del segmento haría ambigua la referencia "schema.tabla"
        return all(
            self.validator.is_valid(part) and "." not in part for part in (schema, name)
        )

    def resolve(self, table: Union[str, TableRef]) -> TableRef:
        if isinstance(table, TableRef):
            return table
        return self.validator.parse_table(table)

    async def describe_columns(
        self, conn: DatabaseConnection, table: Union[str, TableRef]
    ) -> List[Column]:
        """Columnas de la tabla en su orden de definición (ORDINAL_POSITION)"""
        table = self.resolve(table)
        _, rows = await conn.fetch(
            COLUMNS_SQL, (table.schema, table.name, table.schema, table.name)
        )
        return [
            Column(
                name=name,
                data_type=data_type,
                primary_key_ordinal=int(pk_ordinal) if pk_ordinal is not None else None,
            )
            for name, data_type, pk_ordinal in rows
        ]

    async def list_columns(
        self, conn: DatabaseConnection, table: Union[str, TableRef]
    ) -> List[str]:
        return [c.name for c in await self.describe_columns(conn, table)]
