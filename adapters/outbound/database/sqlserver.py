# Adaptador para SQL Server (pyodbc)

import asyncio
import datetime
import logging
import struct
from typing import Any, Callable, List, Optional, Sequence, Tuple

from config.settings import SQLServerSettings, settings
from core.domain.connection import ConnectionParams
from core.domain.errors import ConnectionFailedError, QueryFailedError, ReadFailedError
from core.ports.database_port import ColumnDescription, DatabaseConnection

logger = logging.getLogger(__name__)

# Tipo ODBC de datetimeoffset, que pyodbc no sabe leer por sí solo
SQL_SS_TIMESTAMPOFFSET = -155


def build_connection_string(
    params: ConnectionParams, options: Optional[SQLServerSettings] = None
) -> str:
    options = options or settings.db
    return (
        f"DRIVER={{{options.driver}}};"
        f"SERVER={params.host},{params.port};"
        f"DATABASE={params.database};"
        f"UID={params.user};"
        f"PWD={{{params.password.replace('}', '}}')}}};"
        f"Encrypt={'yes' if options.encrypt else 'no'};"
        f"TrustServerCertificate={'yes' if options.trust_server_certificate else 'no'}"
    )


def decode_datetimeoffset(raw: bytes) -> datetime.datetime:
    """Convierte el buffer SQL_SS_TIMESTAMPOFFSET_STRUCT en datetime con zona"""
    year, month, day, hour, minute, second, fraction, tz_hour, tz_minute = struct.unpack(
        "<6hI2h", raw
    )
    offset = datetime.timezone(datetime.timedelta(hours=tz_hour, minutes=tz_minute))
    return datetime.datetime(
        year, month, day, hour, minute, second, fraction // 1000, tzinfo=offset
    )


def open_pyodbc_connection(params: ConnectionParams):
    import pyodbc  # type: ignore[import-not-found]

    # uniqueidentifier como uuid.UUID en lugar de str
    pyodbc.native_uuid = True
    conn = pyodbc.connect(
        build_connection_string(params),
        autocommit=True,
        timeout=settings.db.login_timeout,
    )
    conn.add_output_converter(SQL_SS_TIMESTAMPOFFSET, decode_datetimeoffset)
    return conn


def converted_types(
    description: List[ColumnDescription], rows: List[tuple]
) -> List[ColumnDescription]:
    """
    Corrige el tipo de las columnas con conversor de salida.

    pyodbc declara `str` para cualquier tipo SQL con conversor registrado
    (datetimeoffset), aunque el valor entregado sea un datetime.
    """
    fixed = list(description)
    for i, (name, wire_type) in enumerate(fixed):
        if wire_type is not str:
            continue
        for row in rows:
            value = row[i]
            if value is not None:
                if not isinstance(value, str):
                    fixed[i] = (name, type(value))
                break
    return fixed


class SQLServerConnection(DatabaseConnection):
    """
    Conexión viva con SQL Server.

    pyodbc es bloqueante: cada llamada corre en un hilo con asyncio.to_thread.
    La exclusión mutua la garantiza ConnectionManager, no esta clase.
    """

    def __init__(self, raw_connection):
        self._conn = raw_connection

    @classmethod
    async def open(
        cls,
        params: ConnectionParams,
        opener: Callable[[ConnectionParams], Any] = open_pyodbc_connection,
    ) -> "SQLServerConnection":
        try:
            raw = await asyncio.to_thread(opener, params)
        except Exception as e:
            logger.error(f"SQL Server connection error ({params.address}): {e}")
            raise ConnectionFailedError(
                f"No se pudo conectar a SQL Server: {e}", host=params.address
            ) from e
        return cls(raw)

    def _run(self, query: str, params: Optional[Sequence[Any]]):
        try:
            cursor = self._conn.cursor()
        except Exception as e:
            logger.error(f"SQL Server error: {e}")
            raise QueryFailedError(f"Conexión no utilizable: {e}", query=query) from e
        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
        except Exception as e:
            cursor.close()
            logger.error(f"SQL Server error: {e}")
            raise QueryFailedError(f"Error al ejecutar la consulta: {e}", query=query) from e
        return cursor

    def _fetch_sync(
        self, query: str, params: Optional[Sequence[Any]]
    ) -> Tuple[List[ColumnDescription], List[tuple]]:
        cursor = self._run(query, params)
        try:
            try:
                description = [(d[0], d[1]) for d in cursor.description or []]
                data = [tuple(row) for row in cursor.fetchall()]
                description = converted_types(description, data)
            except Exception as e:
                logger.error(f"SQL Server read error: {e}")
                raise ReadFailedError(f"Error al leer el resultado: {e}", query=query) from e
            return description, data
        finally:
            cursor.close()

    def _execute_sync(self, query: str, params: Optional[Sequence[Any]]) -> int:
        cursor = self._run(query, params)
        try:
            return cursor.rowcount
        finally:
            cursor.close()

    async def fetch(self, query, params=None):
        logger.debug(f"SQL: {query.strip()} | params={params}")
        return await asyncio.to_thread(self._fetch_sync, query, params)

    async def execute(self, query, params=None):
        logger.debug(f"SQL: {query.strip()} | params={params}")
        return await asyncio.to_thread(self._execute_sync, query, params)

    async def close(self) -> None:
        await asyncio.to_thread(self._conn.close)
