# Entidades de conexión

from dataclasses import dataclass, field
from enum import Enum


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


@dataclass(frozen=True)
class ConnectionParams:
    """Parámetros de un intento de conexión"""

    host: str
    port: int
    user: str
    password: str = field(repr=False)
    database: str

    @property
    def address(self) -> str:
        return f"{self.host},{self.port}"
