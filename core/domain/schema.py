# Entidades de Schema

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TableRef:
    """Referencia a una tabla: par (schema, nombre)"""

    schema: str
    name: str

    def __str__(self) -> str:
        return f"{self.schema}.{self.name}"


@dataclass(frozen=True)
class Column:
    """Columna de un resultado, con el tipo nativo que reporta el servidor"""

    name: str
    data_type: str
    primary_key_ordinal: Optional[int] = None

    @property
    def is_primary_key(self) -> bool:
        return self.primary_key_ordinal is not None

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.data_type}
