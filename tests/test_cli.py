# Tests del adaptador de línea de comandos
# Ejecutar con: pytest tests/test_cli.py -v

import argparse
import json
from unittest.mock import patch

import pytest

from adapters.inbound.cli import build_parser, parse_assignment, run


@pytest.mark.unit
class TestParser:
    def test_parse_assignment_keeps_equals_in_value(self):
        assert parse_assignment("note=a=b") == ("note", "a=b")

    @pytest.mark.parametrize("text", ["sin_igual", "=valor"])
    def test_parse_assignment_rejects(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_assignment(text)

    def test_defaults(self):
        args = build_parser().parse_args(["-t", "dbo.Orders"])
        assert args.page == 1
        assert args.table == "dbo.Orders"
        assert args.assignment is None
        assert not args.serve


@pytest.mark.unit
class TestRun:
    @pytest.fixture
    def cli(self, service):
        with patch("adapters.inbound.cli.create_service", return_value=service):
            yield lambda *argv: run(build_parser().parse_args(["--host", "db.local", *argv]))

    @pytest.mark.asyncio
    async def test_lists_tables_by_default(self, cli, capsys):
        assert await cli() == 0
        assert capsys.readouterr().out.strip() == "dbo.Orders"

    @pytest.mark.asyncio
    async def test_prints_page_as_json(self, cli, capsys):
        assert await cli("-t", "dbo.Orders", "--page", "2", "--page-size", "20") == 0
        body = json.loads(capsys.readouterr().out)
        assert body["total"] == 25
        assert len(body["rows"]) == 5

    @pytest.mark.asyncio
    async def test_updates_cell(self, cli, fake_db, capsys):
        code = await cli("-t", "dbo.Orders", "--pk", "id=5", "--set", "product=cli")
        assert code == 0
        assert "Filas afectadas: 1" in capsys.readouterr().out
        assert fake_db.tables[("dbo", "Orders")].rows[4][1] == "cli"

    @pytest.mark.asyncio
    async def test_set_without_pk(self, cli):
        assert await cli("-t", "dbo.Orders", "--set", "product=x") == 2

    @pytest.mark.asyncio
    async def test_engine_error_exit_code(self, cli, fake_db):
        fake_db.refuse_connections = True
        assert await cli("--tables") == 1

    @pytest.mark.asyncio
    async def test_disconnects_on_exit(self, cli, fake_db):
        await cli("--tables")
        assert fake_db.opened[0].closed
