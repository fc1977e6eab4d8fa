"""
PeakPerformance Backend — Resource Service Unit Tests
=======================================================

What:  Tests for the generic CRUD handler with a mocked AsyncSession.
Why:   Outcome mapping (record / 400 / 404 / 500) is the whole contract, and
       it must hold without a real database.
How:   `mock_db_session.execute` is an AsyncMock; each test shapes its
       return value (rows, rowcount, inserted_primary_key) or side effect.

What we test:
    ✅ Validation failure issues zero database calls
    ✅ Not-found decided by the row set / affected-row count alone
    ✅ Any database exception becomes DatabaseError with the resource message
    ✅ Created response echoes the submitted fields plus the inserted id
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from peakperformance.exceptions import DatabaseError, NotFoundError, ValidationError
from peakperformance.models import Inventory, Product
from peakperformance.schemas.inventory import InventoryCreate, InventoryUpdate
from peakperformance.schemas.product import ProductCreate, ProductUpdate
from peakperformance.services.catalog import INVENTORY_MESSAGES, PRODUCT_MESSAGES
from peakperformance.services.resource_service import ResourceService


PRODUCT = {
    "id_producto": 10,
    "nombre_productos": "Pantalón Jeans",
    "descripcion_productos": "Jeans de mezclilla",
    "precio_producto": 45.0,
    "tiempo_preparacion": "10 minutos",
    "categoria": "Ropa",
}


def _result(**attrs):
    result = MagicMock()
    for name, value in attrs.items():
        setattr(result, name, value)
    return result


def _db_failure():
    return OperationalError("SELECT 1", {}, Exception("connection reset"))


class TestList:
    def setup_method(self):
        self.service = ResourceService(
            "producto", Product, ProductCreate, ProductUpdate, PRODUCT_MESSAGES
        )

    @pytest.mark.asyncio
    async def test_list_maps_rows_by_column_name(self, mock_db_session):
        row = MagicMock()
        row._mapping = {column: PRODUCT[name] for name, column in self.service.columns.items()}
        mock_db_session.execute.return_value = [row]

        records = await self.service.list_records(mock_db_session)

        assert records == [PRODUCT]

    @pytest.mark.asyncio
    async def test_list_empty_table(self, mock_db_session):
        mock_db_session.execute.return_value = []
        assert await self.service.list_records(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_list_failure_uses_list_message(self, mock_db_session):
        mock_db_session.execute.side_effect = _db_failure()

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_records(mock_db_session)

        assert exc_info.value.message == "al obtener los productos"
        assert exc_info.value.context["error_type"] == "OperationalError"
        # Driver text never reaches the client-facing message
        assert "connection reset" not in exc_info.value.message


class TestGet:
    def setup_method(self):
        self.service = ResourceService(
            "inventario", Inventory, InventoryCreate, InventoryUpdate, INVENTORY_MESSAGES
        )

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(first=MagicMock(return_value=None))

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_record(mock_db_session, "999")

        assert exc_info.value.message == "inventario no encontrada"
        assert exc_info.value.context["resource_id"] == "999"

    @pytest.mark.asyncio
    async def test_get_binds_raw_string_id(self, mock_db_session):
        mock_db_session.execute.return_value = _result(first=MagicMock(return_value=None))

        with pytest.raises(NotFoundError):
            await self.service.get_record(mock_db_session, "abc")

        statement = mock_db_session.execute.await_args.args[0]
        assert list(statement.compile().params.values()) == ["abc"]

    @pytest.mark.asyncio
    async def test_get_failure_uses_get_message(self, mock_db_session):
        mock_db_session.execute.side_effect = _db_failure()

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_record(mock_db_session, "1")

        assert exc_info.value.message == "Error al obtener el inventario"


class TestCreate:
    def setup_method(self):
        self.service = ResourceService(
            "producto", Product, ProductCreate, ProductUpdate, PRODUCT_MESSAGES
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["id_producto", "nombre_productos", "precio_producto"])
    @pytest.mark.parametrize("falsy", [None, "", 0])
    async def test_falsy_required_field_rejected_without_query(self, mock_db_session, field, falsy):
        payload = ProductCreate(**dict(PRODUCT, **{field: falsy}))

        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_record(mock_db_session, payload)

        assert exc_info.value.message == "Nombre y precio son requeridos"
        assert exc_info.value.fields == [field]
        mock_db_session.execute.assert_not_awaited()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_returns_inserted_id_and_fields(self, mock_db_session):
        mock_db_session.execute.return_value = _result(inserted_primary_key=(10,))

        body = await self.service.create_record(mock_db_session, ProductCreate(**PRODUCT))

        assert body == {"id": 10, **PRODUCT}
        assert list(body)[0] == "id"
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_inserts_every_column(self, mock_db_session):
        mock_db_session.execute.return_value = _result(inserted_primary_key=(10,))

        await self.service.create_record(mock_db_session, ProductCreate(**PRODUCT))

        statement = mock_db_session.execute.await_args.args[0]
        assert statement.compile().params == PRODUCT

    @pytest.mark.asyncio
    async def test_create_failure_uses_create_message(self, mock_db_session):
        mock_db_session.execute.side_effect = _db_failure()

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_record(mock_db_session, ProductCreate(**PRODUCT))

        assert exc_info.value.message == "Error al crear el producto"


class TestUpdate:
    def setup_method(self):
        self.service = ResourceService(
            "producto", Product, ProductCreate, ProductUpdate, PRODUCT_MESSAGES
        )

    @pytest.mark.asyncio
    async def test_update_success(self, mock_db_session):
        mock_db_session.execute.return_value = _result(rowcount=1)

        body = await self.service.update_record(
            mock_db_session, "10", ProductUpdate(precio_producto=50)
        )

        assert body == {"message": "Producto actualizado correctamente"}

    @pytest.mark.asyncio
    async def test_update_writes_only_submitted_fields(self, mock_db_session):
        mock_db_session.execute.return_value = _result(rowcount=1)

        await self.service.update_record(
            mock_db_session, "10", ProductUpdate(precio_producto=50, categoria="Ofertas")
        )

        statement = mock_db_session.execute.await_args.args[0]
        params = statement.compile().params
        assert params["precio_producto"] == 50
        assert params["categoria"] == "Ofertas"
        assert "nombre_productos" not in params

    @pytest.mark.asyncio
    async def test_update_zero_rows_is_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(rowcount=0)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.update_record(
                mock_db_session, "999", ProductUpdate(categoria="Ropa")
            )

        assert exc_info.value.message == "Producto no encontrado "

    @pytest.mark.asyncio
    async def test_update_many_rows_is_success(self, mock_db_session):
        mock_db_session.execute.return_value = _result(rowcount=3)

        body = await self.service.update_record(
            mock_db_session, "10", ProductUpdate(categoria="Ropa")
        )

        assert body["message"] == "Producto actualizado correctamente"

    @pytest.mark.asyncio
    async def test_empty_update_checks_existence(self, mock_db_session):
        mock_db_session.execute.return_value = _result(first=MagicMock(return_value=None))

        with pytest.raises(NotFoundError):
            await self.service.update_record(mock_db_session, "999", ProductUpdate())

    @pytest.mark.asyncio
    async def test_empty_update_on_existing_row(self, mock_db_session):
        mock_db_session.execute.return_value = _result(first=MagicMock(return_value=(10,)))

        body = await self.service.update_record(mock_db_session, "10", ProductUpdate())

        assert body == {"message": "Producto actualizado correctamente"}

    @pytest.mark.asyncio
    async def test_update_failure_uses_update_message(self, mock_db_session):
        mock_db_session.execute.side_effect = _db_failure()

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.update_record(
                mock_db_session, "10", ProductUpdate(categoria="Ropa")
            )

        assert exc_info.value.message == "Error al actualizar el producto"


class TestDelete:
    def setup_method(self):
        self.service = ResourceService(
            "producto", Product, ProductCreate, ProductUpdate, PRODUCT_MESSAGES
        )

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_db_session):
        mock_db_session.execute.return_value = _result(rowcount=1)

        body = await self.service.delete_record(mock_db_session, "10")

        assert body == {"message": "Producto eliminado corectamente"}

    @pytest.mark.asyncio
    async def test_delete_zero_rows_is_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(rowcount=0)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.delete_record(mock_db_session, "10")

        assert exc_info.value.message == "Producto no encontrado"

    @pytest.mark.asyncio
    async def test_delete_twice(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=[_result(rowcount=1), _result(rowcount=0)]
        )

        await self.service.delete_record(mock_db_session, "10")
        with pytest.raises(NotFoundError):
            await self.service.delete_record(mock_db_session, "10")

    @pytest.mark.asyncio
    async def test_delete_failure_uses_delete_message(self, mock_db_session):
        mock_db_session.execute.side_effect = _db_failure()

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.delete_record(mock_db_session, "10")

        assert exc_info.value.message == "Error al eliminar el producto"
