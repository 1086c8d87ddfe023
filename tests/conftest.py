# Configuración central de pytest y fixtures compartidos

import datetime
import decimal
import functools
import os
import re
import sys
import threading
import time
from typing import Dict, List, Tuple
from unittest.mock import MagicMock, patch

import pytest
import pytest_asyncio

# Asegurar que el directorio raíz esté en el path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adapters.factory import create_service  # noqa: E402
from adapters.outbound.database.sqlserver import SQLServerConnection  # noqa: E402
from core.domain.connection import ConnectionParams  # noqa: E402


# MARKERS PERSONALIZADOS

def pytest_configure(config):
    """Registrar markers personalizados"""
    config.addinivalue_line(
        "markers", "unit: Tests unitarios rápidos (sin servicios externos)"
    )


# SERVIDOR FALSO (DB-API en memoria)
#
# Interpreta solo las formas de SQL que genera el motor y registra cada
# llamada para verificar orden y parámetros.

TABLE_RE = re.compile(r"FROM \[([^\]]+)\]\.\[([^\]]+)\]")
UPDATE_RE = re.compile(
    r"UPDATE \[([^\]]+)\]\.\[([^\]]+)\] SET \[([^\]]+)\] = \? WHERE \[([^\]]+)\] = \?"
)
ORDER_RE = re.compile(r"OVER \(ORDER BY (.+?)\) AS ")
ORDER_TERM_RE = re.compile(r"\[([^\]]+)\] (ASC|DESC)")


class FakeDriverError(Exception):
    pass


class FakeTable:
    def __init__(self, columns, rows, primary_key=()):
        # columns: [(nombre, DATA_TYPE, tipo python del driver)]
        self.columns = list(columns)
        self.rows = [list(r) for r in rows]
        self.primary_key = list(primary_key)

    def index(self, column: str) -> int:
        return [c[0] for c in self.columns].index(column)


class FakeDatabase:
    def __init__(self):
        self.tables: Dict[Tuple[str, str], FakeTable] = {}
        self.calls: List[Tuple[str, str, tuple]] = []
        self.events: List[str] = []
        self.failures: Dict[str, Exception] = {}
        self.read_failures: set = set()
        self.delay = 0.0
        self.refuse_connections = False
        self.opened: List["FakeConnection"] = []
        self._lock = threading.Lock()

    def add_table(self, schema, name, columns, rows=(), primary_key=()) -> FakeTable:
        table = FakeTable(columns, rows, primary_key)
        self.tables[(schema, name)] = table
        return table

    def opener(self, params: ConnectionParams) -> "FakeConnection":
        if self.refuse_connections:
            raise FakeDriverError(f"Login failed for user '{params.user}'")
        conn = FakeConnection(self)
        self.opened.append(conn)
        return conn

    def kinds(self) -> List[str]:
        return [kind for kind, _, _ in self.calls]

    @staticmethod
    def classify(sql: str) -> str:
        if "INFORMATION_SCHEMA.COLUMNS" in sql:
            return "columns"
        if "INFORMATION_SCHEMA.TABLES" in sql:
            return "tables"
        if "COUNT_BIG(*)" in sql:
            return "count"
        if "ROW_NUMBER()" in sql:
            return "page"
        if sql.lstrip().startswith("UPDATE"):
            return "update"
        return "other"

    def run(self, cursor: "FakeCursor", sql: str, params: tuple) -> None:
        kind = self.classify(sql)
        with self._lock:
            self.calls.append((kind, sql, params))
            self.events.append(f"start:{kind}")
        if self.delay:
            time.sleep(self.delay)
        try:
            if kind in self.failures:
                raise self.failures[kind]
            getattr(self, f"_run_{kind}")(cursor, sql, params)
            cursor.read_error = kind in self.read_failures
        finally:
            with self._lock:
                self.events.append(f"end:{kind}")

    def _table(self, sql: str) -> FakeTable:
        match = TABLE_RE.search(sql)
        key = (match.group(1), match.group(2))
        if key not in self.tables:
            raise FakeDriverError(f"Invalid object name '{key[0]}.{key[1]}'")
        return self.tables[key]

    def _run_tables(self, cursor, sql, params):
        cursor.set_result([("TABLE_SCHEMA", str), ("TABLE_NAME", str)], sorted(self.tables))

    def _run_columns(self, cursor, sql, params):
        schema, name = params[2], params[3]
        table = self.tables.get((schema, name))
        rows = []
        if table is not None:
            for col_name, data_type, _ in table.columns:
                ordinal = (
                    table.primary_key.index(col_name) + 1
                    if col_name in table.primary_key
                    else None
                )
                rows.append((col_name, data_type, ordinal))
        cursor.set_result(
            [("COLUMN_NAME", str), ("DATA_TYPE", str), ("ORDINAL_POSITION", int)], rows
        )

    def _run_count(self, cursor, sql, params):
        table = self._table(sql)
        cursor.set_result([("", int)], [(len(table.rows),)])

    def _run_page(self, cursor, sql, params):
        table = self._table(sql)
        low, high = params
        assert isinstance(low, int) and isinstance(high, int)
        description = [(name, wire_type) for name, _, wire_type in table.columns]
        ordered = self._ordered(table, ORDER_RE.search(sql).group(1))
        cursor.set_result(description, [tuple(r) for r in ordered[low:high]])

    @staticmethod
    def _ordered(table: FakeTable, order_by: str) -> List[list]:
        # sort estable aplicado del último término al primero; (SELECT NULL) deja el orden de inserción
        rows = list(table.rows)
        for column, direction in reversed(ORDER_TERM_RE.findall(order_by)):
            i = table.index(column)
            rows.sort(key=lambda r: r[i], reverse=direction == "DESC")
        return rows

    def _run_update(self, cursor, sql, params):
        match = UPDATE_RE.search(sql)
        table = self.tables[(match.group(1), match.group(2))]
        column, pk_column = table.index(match.group(3)), table.index(match.group(4))
        value, pk_value = params
        affected = 0
        for row in table.rows:
            if str(row[pk_column]) == pk_value:
                row[column] = value
                affected += 1
        cursor.description = None
        cursor.rowcount = affected


class FakeCursor:
    def __init__(self, db: FakeDatabase):
        self.db = db
        self.description = None
        self.rowcount = -1
        self.read_error = False
        self._rows: List[tuple] = []

    def set_result(self, columns, rows):
        self.description = [(name, wire_type, None, None, None, None, True) for name, wire_type in columns]
        self._rows = list(rows)
        self.rowcount = -1

    def execute(self, sql, params=None):
        self.db.run(self, sql, tuple(params) if params else ())
        return self

    def fetchall(self):
        if self.read_error:
            raise FakeDriverError("Communication link failure")
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: FakeDatabase):
        self.db = db
        self.closed = False

    def cursor(self) -> FakeCursor:
        if self.closed:
            raise FakeDriverError("Attempt to use a closed connection.")
        return FakeCursor(self.db)

    def close(self):
        self.closed = True


# FIXTURES

ORDERS_COLUMNS = [
    ("id", "int", int),
    ("product", "nvarchar", str),
    ("amount", "decimal", decimal.Decimal),
    ("exchangeTime", "datetime", datetime.datetime),
]


def make_orders(count: int) -> List[tuple]:
    base = datetime.datetime(2024, 1, 1, 8, 0, 0)
    return [
        (i, f"item-{i}", decimal.Decimal(f"{i}.50"), base + datetime.timedelta(hours=i))
        for i in range(1, count + 1)
    ]


@pytest.fixture
def fake_db() -> FakeDatabase:
    db = FakeDatabase()
    db.add_table("dbo", "Orders", ORDERS_COLUMNS, make_orders(25), primary_key=["id"])
    return db


@pytest.fixture
def connection_params() -> ConnectionParams:
    return ConnectionParams(
        host="db.local", port=1433, user="sa", password="s3cret", database="plant"
    )


@pytest.fixture
def fake_connector(fake_db):
    return functools.partial(SQLServerConnection.open, opener=fake_db.opener)


@pytest.fixture
def service(fake_connector):
    return create_service(connector=fake_connector)


@pytest_asyncio.fixture
async def connected_service(service, connection_params):
    await service.connect(connection_params)
    yield service
    await service.disconnect()


# FIXTURES DE API

@pytest.fixture
def mock_deps(service):
    """AppDependencies con el servicio conectado al servidor falso"""
    mock = MagicMock()
    mock.service = service
    return mock


@pytest.fixture
def api_client(mock_deps):
    """Cliente HTTP con las dependencias reemplazadas"""
    from fastapi.testclient import TestClient

    from adapters.inbound.api import app
    from adapters.inbound.dependencies import AppDependencies

    with patch.object(AppDependencies, "get_instance", return_value=mock_deps):
        with TestClient(app) as client:
            yield client
