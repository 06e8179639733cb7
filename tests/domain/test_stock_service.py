"""Unit tests for the StockService domain service."""

import pytest

from retail_oms.domain.exceptions import (
    ConcurrencyError,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from retail_oms.domain.model.order import Order, OrderItem
from retail_oms.domain.model.product import Product
from retail_oms.domain.model.value_objects import Money, Quantity
from retail_oms.domain.service.stock_service import StockService
from tests.fakes import FakeProductRepository


def _product(pid: str, name: str, stock: int) -> Product:
    return Product.create(
        id=pid,
        name=name,
        price=Money.of("10.00"),
        stock_quantity=stock,
        category="Tools",
        sku=f"SKU-{pid}",
    )


def _setup(*products: Product) -> tuple[StockService, FakeProductRepository]:
    repo = FakeProductRepository(list(products))
    return StockService(repo), repo


class TestLookups:

    def test_unknown_product(self):
        svc, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            svc.get_product("42")

    def test_is_available(self):
        svc, _ = _setup(_product("1", "Widget", 5))
        assert svc.is_available("1", 5)
        assert not svc.is_available("1", 6)

    def test_is_available_unknown_product(self):
        svc, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            svc.is_available("42", 1)


class TestUpdateStock:

    def test_replaces_value(self):
        svc, repo = _setup(_product("1", "Widget", 5))
        svc.update_stock("1", 40)
        assert repo.stock_of("1") == 40

    def test_negative_rejected(self):
        svc, repo = _setup(_product("1", "Widget", 5))
        with pytest.raises(ValidationError):
            svc.update_stock("1", -2)
        assert repo.stock_of("1") == 5


class TestReserve:

    def test_decrements_stock(self):
        svc, repo = _setup(_product("1", "Widget", 10))
        svc.reserve(repo.get_by_id("1"), 3)
        assert repo.stock_of("1") == 7

    def test_reserving_everything_leaves_zero(self):
        svc, repo = _setup(_product("1", "Widget", 4))
        svc.reserve(repo.get_by_id("1"), 4)
        assert repo.stock_of("1") == 0

    def test_insufficient_stock_names_product_and_writes_nothing(self):
        svc, repo = _setup(_product("1", "Widget", 2))
        with pytest.raises(InsufficientStockError, match="Widget") as exc_info:
            svc.reserve(repo.get_by_id("1"), 3)
        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2
        assert repo.stock_of("1") == 2

    def test_stale_read_cannot_commit(self):
        svc, repo = _setup(_product("1", "Widget", 10))
        first = repo.get_by_id("1")
        second = repo.get_by_id("1")

        svc.reserve(first, 6)
        with pytest.raises(ConcurrencyError):
            svc.reserve(second, 6)

        assert repo.stock_of("1") == 4


class TestRestore:

    def test_restore_for_order(self):
        svc, repo = _setup(_product("1", "Widget", 0), _product("2", "Gadget", 3))
        order = Order(id=1, user_id="1", shipping_address="123 Main St")
        for pid, name, qty in [("1", "Widget", 4), ("2", "Gadget", 2)]:
            order.add_item(
                OrderItem(
                    product_id=pid,
                    product_name=name,
                    quantity=Quantity(qty),
                    unit_price=Money.of("10.00"),
                )
            )

        svc.restore_for_order(order)

        assert repo.stock_of("1") == 4
        assert repo.stock_of("2") == 5
