# Tests de actualización de celdas
# Ejecutar con: pytest tests/test_update_executor.py -v

import pytest

from core.domain.errors import InvalidIdentifierError, NotConnectedError, QueryFailedError
from core.security.identifier_validator import IdentifierValidator
from core.services.update_executor import UpdateExecutor


@pytest.mark.unit
class TestUpdateSql:
    def test_identifiers_quoted_values_as_placeholders(self):
        sql = UpdateExecutor(IdentifierValidator()).build_update_sql(
            "dbo.Orders", "id", "product"
        )
        assert sql == "UPDATE [dbo].[Orders] SET [product] = ? WHERE [id] = ?"

    @pytest.mark.parametrize(
        "table,pk_column,column",
        [
            ("dbo.Orders;", "id", "product"),
            ("dbo.Orders", "id = 1 OR 1", "product"),
            ("dbo.Orders", "id", "product]=''--"),
        ],
    )
    def test_rejects_unsafe_identifiers(self, table, pk_column, column):
        with pytest.raises(InvalidIdentifierError):
            UpdateExecutor(IdentifierValidator()).build_update_sql(table, pk_column, column)


@pytest.mark.unit
class TestUpdateCell:
    @pytest.mark.asyncio
    async def test_updates_one_row(self, fake_db, connected_service):
        affected = await connected_service.update_cell("dbo.Orders", "id", "3", "product", "renamed")

        assert affected == 1
        assert fake_db.tables[("dbo", "Orders")].rows[2][1] == "renamed"
        kind, _, params = fake_db.calls[-1]
        assert kind == "update"
        assert params == ("renamed", "3")

    @pytest.mark.asyncio
    async def test_values_are_never_interpolated(self, fake_db, connected_service):
        payload = "x'; DROP TABLE Orders; --"
        await connected_service.update_cell("dbo.Orders", "id", "1", "product", payload)

        _, sql, params = fake_db.calls[-1]
        assert payload not in sql
        assert params[0] == payload

    @pytest.mark.asyncio
    async def test_missing_primary_key_is_zero_not_error(self, connected_service):
        assert await connected_service.update_cell("dbo.Orders", "id", "999", "product", "x") == 0

    @pytest.mark.asyncio
    async def test_invalid_identifier_never_reaches_server(self, fake_db, connected_service):
        with pytest.raises(InvalidIdentifierError):
            await connected_service.update_cell("dbo.Orders", "id", "1", "product name", "x")
        assert fake_db.calls == []

    @pytest.mark.asyncio
    async def test_server_rejection_is_query_failed(self, fake_db, connected_service):
        fake_db.failures["update"] = RuntimeError("Conversion failed when converting the nvarchar value")
        with pytest.raises(QueryFailedError) as exc_info:
            await connected_service.update_cell("dbo.Orders", "id", "1", "amount", "abc")
        assert exc_info.value.details["query"].startswith("UPDATE [dbo].[Orders]")

    @pytest.mark.asyncio
    async def test_requires_connection(self, service):
        with pytest.raises(NotConnectedError):
            await service.update_cell("dbo.Orders", "id", "1", "product", "x")
