# Puerto de Base de Datos

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

# (nombre de columna, tipo declarado por el driver)
ColumnDescription = Tuple[str, Optional[type]]


class DatabaseConnection(ABC):
    """
    Puerto para una conexión viva con el servidor.

    Los identificadores ya vienen validados y entre corchetes dentro del SQL;
    los valores siempre viajan en `params` como parámetros ligados (`?`).
    """

    @abstractmethod
    async def fetch(
        self, query: str, params: Optional[Sequence[Any]] = None
    ) -> Tuple[List[ColumnDescription], List[tuple]]:
        """
        Ejecuta una consulta y consume todas sus filas.

        Raises:
            QueryFailedError: si el servidor rechaza la sentencia
            ReadFailedError: si no se pueden leer las filas
        """
        pass

    @abstractmethod
    async def execute(self, query: str, params: Optional[Sequence[Any]] = None) -> int:
        """Ejecuta una sentencia sin resultado y retorna las filas afectadas"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Cierra la conexión"""
        pass
