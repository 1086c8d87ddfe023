# CLI Adapter - Entry point por línea de comandos

import argparse
import asyncio
import json
import logging
import sys
from typing import Tuple

from adapters.factory import create_service
from config.settings import settings
from core.domain.connection import ConnectionParams
from core.domain.errors import DataAccessError
from utils.logging import setup_logging


def parse_assignment(text: str) -> Tuple[str, str]:
    """Parsea "COLUMNA=VALOR" """
    column, sep, value = text.partition("=")
    if not sep or not column:
        raise argparse.ArgumentTypeError(f"Se esperaba COLUMNA=VALOR, recibido: {text!r}")
    return column, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{settings.app_name} - SQL Server")
    parser.add_argument("--host", default=settings.db.host)
    parser.add_argument("--port", type=int, default=settings.db.port)
    parser.add_argument("--user", default=settings.db.user)
    parser.add_argument("--password", default=settings.db.password)
    parser.add_argument("--database", default=settings.db.database)

    parser.add_argument("--tables", action="store_true", help="Lista las tablas")
    parser.add_argument("--table", "-t", help="Tabla en formato schema.tabla")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, default=settings.pagination.default_page_size)
    parser.add_argument("--pk", type=parse_assignment, help="Clave primaria: COLUMNA=VALOR")
    parser.add_argument("--set", dest="assignment", type=parse_assignment, help="Celda: COLUMNA=VALOR")

    parser.add_argument("--serve", action="store_true", help="Levanta la API HTTP")
    parser.add_argument("--api-host", default="0.0.0.0")
    parser.add_argument("--api-port", type=int, default=8000)
    return parser


async def run(args: argparse.Namespace) -> int:
    service = create_service()
    params = ConnectionParams(
        host=args.host,
        port=args.port,
        user=args.user,
        password=args.password,
        database=args.database,
    )
    try:
        await service.connect(params)

        # Modo listado
        if args.tables or not args.table:
            for table in await service.list_tables():
                print(table)
            return 0

        # Modo actualización
        if args.assignment:
            if not args.pk:
                print("Error: --set requiere --pk COLUMNA=VALOR")
                return 2
            pk_column, pk_value = args.pk
            column, value = args.assignment
            affected = await service.update_cell(args.table, pk_column, pk_value, column, value)
            print(f"Filas afectadas: {affected}")
            return 0

        # Modo página
        result = await service.fetch_page(args.table, args.page, args.page_size)
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0
    except DataAccessError as e:
        logging.error(f"{e.code}: {e.message}")
        return 1
    finally:
        await service.disconnect()


def serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("adapters.inbound.api:app", host=args.api_host, port=args.api_port)


def main():
    args = build_parser().parse_args()
    setup_logging()

    # Modo API
    if args.serve:
        serve(args)
        return
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
