"""Tests for ProductService business rules."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from catalog_server.exceptions import ProductValidationError
from catalog_server.schemas.product import ProductInput
from catalog_server.services.product_service import ProductRules, ProductService
from catalog_server.services.product_store import ProductStore


@pytest.fixture
def service(session):
    return ProductService(ProductStore(session))


def _naive_utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TestCreate:

    async def test_assigns_new_id_and_creation_time(self, service):
        before = _naive_utc_now()
        first = await service.create_product(ProductInput(name="Widget", price=Decimal("9.99")))
        second = await service.create_product(ProductInput(name="Gadget", price=Decimal("5")))
        after = _naive_utc_now()

        assert first.id != second.id
        # SQLite hands datetimes back without a timezone
        assert before <= first.created_at.replace(tzinfo=None) <= after

    async def test_uses_injected_clock(self, session):
        fixed = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        service = ProductService(ProductStore(session), clock=lambda: fixed)

        product = await service.create_product(ProductInput(name="Widget", price=Decimal("1")))

        assert product.created_at.replace(tzinfo=None) == fixed.replace(tzinfo=None)

    async def test_missing_description_becomes_empty(self, service):
        product = await service.create_product(ProductInput(name="Widget", price=Decimal("1")))

        assert product.description == ""

    async def test_round_trip_through_get(self, service):
        created = await service.create_product(
            ProductInput(name="Widget", description="A widget", price=Decimal("9.99"))
        )

        fetched = await service.get_product(created.id)

        assert fetched.name == "Widget"
        assert fetched.description == "A widget"
        assert fetched.price == Decimal("9.99")

    async def test_no_validation_by_default(self, service):
        product = await service.create_product(ProductInput(name="", price=Decimal("-5")))

        assert product is not None
        assert product.price == Decimal("-5")


class TestMissingIds:

    async def test_get_returns_none(self, service):
        assert await service.get_product(12345) is None

    async def test_update_returns_none(self, service):
        result = await service.update_product(12345, ProductInput(name="X", price=Decimal("1")))

        assert result is None

    async def test_delete_returns_false(self, service):
        assert await service.delete_product(12345) is False


async def test_delete_twice(service):
    product = await service.create_product(ProductInput(name="Widget", price=Decimal("1")))

    assert await service.delete_product(product.id) is True
    assert await service.delete_product(product.id) is False


async def test_update_is_a_full_replace(service):
    product = await service.create_product(
        ProductInput(name="Widget", description="Shiny", price=Decimal("2"))
    )

    updated = await service.update_product(
        product.id, ProductInput(name="Widget II", price=Decimal("3"))
    )

    assert updated.name == "Widget II"
    assert updated.description == ""
    assert updated.price == Decimal("3")


async def test_list_with_search(service):
    for name in ("Apple", "Banana", "Pineapple"):
        await service.create_product(ProductInput(name=name, price=Decimal("1")))

    assert len(await service.list_products()) == 3
    assert sorted(p.name for p in await service.list_products("apple")) == ["Apple", "Pineapple"]
    assert await service.list_products("cherry") == []


class TestRules:

    @pytest.fixture
    def strict(self, session):
        rules = ProductRules(
            enforce_non_negative_price=True,
            reject_blank_name=True,
            max_name_length=10,
        )
        return ProductService(ProductStore(session), rules)

    @pytest.mark.parametrize("product_input", [
        ProductInput(name="   ", price=Decimal("1")),
        ProductInput(name="Far too long a name", price=Decimal("1")),
        ProductInput(name="Widget", price=Decimal("-0.01")),
    ])
    async def test_rejected_create_returns_none(self, strict, product_input):
        assert await strict.create_product(product_input) is None
        assert await strict.list_products() == []

    async def test_rejected_create_is_not_logged_by_the_service(self, strict, caplog):
        with caplog.at_level(logging.DEBUG, logger="catalog_server.services"):
            await strict.create_product(ProductInput(name="Widget", price=Decimal("-1")))

        assert [r for r in caplog.records if r.name.startswith("catalog_server")] == []

    async def test_rejected_update_of_missing_product_returns_none(self, strict):
        result = await strict.update_product(999, ProductInput(name="X", price=Decimal("-1")))

        assert result is None

    async def test_rejected_update_raises(self, strict):
        product = await strict.create_product(ProductInput(name="Widget", price=Decimal("1")))

        with pytest.raises(ProductValidationError) as exc_info:
            await strict.update_product(product.id, ProductInput(name="Widget", price=Decimal("-1")))

        assert exc_info.value.field == "price"
        assert (await strict.get_product(product.id)).price == Decimal("1")

    def test_from_settings(self, server_settings):
        settings = server_settings.model_copy(update={
            "enforce_non_negative_price": True,
            "max_name_length": 40,
        })

        rules = ProductRules.from_settings(settings)

        assert rules == ProductRules(
            enforce_non_negative_price=True,
            reject_blank_name=False,
            max_name_length=40,
        )


class TestStorageFaults:

    @pytest.fixture
    async def broken(self, server_app, service):
        async with server_app.state.engine.begin() as conn:
            await conn.execute(text("DROP TABLE products"))
        return service

    async def test_list_propagates(self, broken):
        with pytest.raises(OperationalError):
            await broken.list_products()

    async def test_create_propagates(self, broken):
        with pytest.raises(OperationalError):
            await broken.create_product(ProductInput(name="Widget", price=Decimal("1")))
