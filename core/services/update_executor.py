# Actualización de una celda: UPDATE de una columna filtrado por clave primaria

import logging

from core.ports.database_port import DatabaseConnection
from core.security.identifier_validator import IdentifierValidator

logger = logging.getLogger(__name__)


class UpdateExecutor:
    def __init__(self, validator: IdentifierValidator):
        self.validator = validator

    def build_update_sql(self, table: str, pk_column: str, column: str) -> str:
        ref = self.validator.parse_table(table)
        return (
            f"UPDATE {self.validator.quote_table(ref)} "
            f"SET {self.validator.quote(column)} = ? "
            f"WHERE {self.validator.quote(pk_column)} = ?"
        )

    async def update_cell(
        self,
        conn: DatabaseConnection,
        table: str,
        pk_column: str,
        pk_value: str,
        column: str,
        value: str,
    ) -> int:
        """
        Actualiza `column` en la fila cuya `pk_column` vale `pk_value`.

        Los valores van siempre como parámetros ligados. Retorna las filas
        afectadas; 0 si ninguna fila coincide.
        """
        sql = self.build_update_sql(table, pk_column, column)
        affected = await conn.execute(sql, (value, pk_value))
        affected = max(affected or 0, 0)
        logger.info(f"UPDATE {table}.{column} ({pk_column}={pk_value!r}): {affected} filas")
        return affected
