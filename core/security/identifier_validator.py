# Validador de identificadores: lista blanca para nombres de schema, tabla y columna

import logging
from typing import Optional

from core.domain.errors import InvalidIdentifierError
from core.domain.schema import TableRef

logger = logging.getLogger(__name__)

ALLOWED_PUNCTUATION = frozenset("._")


# Los identificadores no se pueden ligar como parámetros en T-SQL, así que
# solo llegan al texto SQL si pasan por este validador
class IdentifierValidator:
    def __init__(self, default_schema: str = "dbo"):
        self.default_schema = self.validate(default_schema)

    @staticmethod
    def is_valid(name: Optional[str]) -> bool:
        if not name:
            return False
        return all(ch.isalnum() or ch in ALLOWED_PUNCTUATION for ch in name)

    @classmethod
    def validate(cls, name: str) -> str:
        """Retorna el nombre si es válido, si no lanza InvalidIdentifierError"""
        if not cls.is_valid(name):
            logger.warning(f"Identificador rechazado: {name!r}")
            raise InvalidIdentifierError(name)
        return name

    def parse_table(self, table: str) -> TableRef:
        """
        Convierte "schema.tabla" en TableRef validando cada segmento.

        Un nombre sin punto usa el schema por defecto.
        """
        self.validate(table)
        parts = table.split(".")
        if len(parts) == 1:
            return TableRef(self.default_schema, parts[0])
        if len(parts) != 2 or not all(parts):
            logger.warning(f"Referencia de tabla inválida: {table!r}")
            raise InvalidIdentifierError(table)
        return TableRef(parts[0], parts[1])

    @classmethod
    def quote(cls, name: str) -> str:
        return f"[{cls.validate(name)}]"

    @classmethod
    def quote_table(cls, ref: TableRef) -> str:
        return f"{cls.quote(ref.schema)}.{cls.quote(ref.name)}"
