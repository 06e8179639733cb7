"""Integration tests for product and user maintenance."""

import pytest

from retail_oms.application.delete_product import DeleteProductHandler
from retail_oms.application.delete_user import DeleteUserHandler
from retail_oms.application.list_products import ListProductsHandler
from retail_oms.application.show_product import ShowProductHandler
from retail_oms.application.show_user import ShowUserHandler
from retail_oms.application.update_product import UpdateProductHandler
from retail_oms.application.update_user import UpdateUserHandler
from retail_oms.domain.exceptions import (
    EntityNotFoundError,
    InvalidStateError,
    ValidationError,
)
from retail_oms.domain.model.order import OrderStatus
from retail_oms.domain.model.value_objects import Money
from tests.application.helpers import force_status, place_order


class TestShowProduct:

    def test_by_id_and_sku(self, repos):
        handler = ShowProductHandler(repos.products)
        assert handler.by_id("2").sku == "GAD-001"
        assert handler.by_sku("WID-001").id == "1"

    def test_unknown_sku(self, repos):
        with pytest.raises(EntityNotFoundError, match="SKU: NOPE"):
            ShowProductHandler(repos.products).by_sku("NOPE")


class TestListProducts:

    def test_available_skips_sold_out(self, repos):
        product = repos.products.get_by_id("2")
        product.set_stock(0)
        repos.products.save(product)

        available = ListProductsHandler(repos.products).available()

        assert [p.id for p in available] == ["1"]

    def test_by_category_ignores_case(self, repos):
        assert len(ListProductsHandler(repos.products).by_category("tools")) == 2
        assert ListProductsHandler(repos.products).by_category("Garden") == []

    def test_categories_are_distinct_and_sorted(self, repos):
        UpdateProductHandler(repos.products).handle("2", category="Electronics")
        assert ListProductsHandler(repos.products).categories() == ["Electronics", "Tools"]


class TestUpdateProduct:

    def test_partial_update_keeps_other_fields(self, repos):
        product = UpdateProductHandler(repos.products).handle(
            "1", name="Widget Pro", image_url="https://img.example.com/w.png",
        )
        assert product.name == "Widget Pro"
        assert product.price == Money.of("50.00")

        stored = repos.products.get_by_id("1")
        assert stored.name == "Widget Pro"
        assert stored.image_url == "https://img.example.com/w.png"
        assert stored.sku == "WID-001"
        assert stored.stock_quantity == 10

    def test_blank_fields_ignored(self, repos):
        UpdateProductHandler(repos.products).handle("1", name="  ", category="")
        stored = repos.products.get_by_id("1")
        assert stored.name == "Widget"
        assert stored.category == "Tools"

    def test_new_sku(self, repos):
        UpdateProductHandler(repos.products).handle("1", sku="WID-002")
        assert ShowProductHandler(repos.products).by_sku("WID-002").id == "1"

    def test_keeping_own_sku_is_allowed(self, repos):
        product = UpdateProductHandler(repos.products).handle("1", sku="WID-001", new_price="45")
        assert product.price == Money.of("45")

    def test_sku_taken_by_another_product(self, repos):
        with pytest.raises(ValidationError, match="SKU already exists: GAD-001"):
            UpdateProductHandler(repos.products).handle("1", sku="GAD-001")
        assert repos.products.get_by_id("1").sku == "WID-001"

    def test_unknown_product(self, repos):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(repos.products).handle("42", name="Ghost")


class TestDeleteProduct:

    def test_delete(self, repos):
        DeleteProductHandler(repos.products, repos.orders).handle("2")
        assert repos.products.get_by_id("2") is None

    def test_refused_while_on_pending_order(self, repos):
        order_id = place_order(repos, [("1", 1)])
        with pytest.raises(InvalidStateError, match=f"PENDING order #{order_id}"):
            DeleteProductHandler(repos.products, repos.orders).handle("1")
        assert repos.products.get_by_id("1") is not None

    def test_refused_while_on_confirmed_order(self, repos):
        order_id = place_order(repos, [("1", 1)])
        force_status(repos, order_id, OrderStatus.CONFIRMED)
        with pytest.raises(InvalidStateError, match="CONFIRMED"):
            DeleteProductHandler(repos.products, repos.orders).handle("1")

    def test_allowed_once_order_has_shipped(self, repos):
        order_id = place_order(repos, [("1", 1)])
        force_status(repos, order_id, OrderStatus.SHIPPED)

        DeleteProductHandler(repos.products, repos.orders).handle("1")

        assert repos.products.get_by_id("1") is None
        assert repos.orders.get_by_id(order_id).items[0].product_id == "1"

    def test_unknown_product(self, repos):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(repos.products, repos.orders).handle("42")


class TestUserMaintenance:

    def test_show_by_id_and_username(self, repos):
        handler = ShowUserHandler(repos.users)
        assert handler.by_id("2").username == "bob"
        assert handler.by_username("alice").id == "1"

    def test_show_unknown(self, repos):
        with pytest.raises(EntityNotFoundError, match="username: carol"):
            ShowUserHandler(repos.users).by_username("carol")

    def test_update(self, repos):
        user = UpdateUserHandler(repos.users).handle(
            "1", email="alice@work.example.com", first_name="Alice",
        )
        assert user.email == "alice@work.example.com"
        assert user.full_name == "Alice"
        assert repos.users.get_by_email("alice@work.example.com").id == "1"

    def test_update_to_own_username_is_allowed(self, repos):
        user = UpdateUserHandler(repos.users).handle("1", username="alice")
        assert user.username == "alice"

    def test_update_to_taken_username_rejected(self, repos):
        with pytest.raises(ValidationError, match="Username already exists"):
            UpdateUserHandler(repos.users).handle("1", username="bob")

    def test_update_to_taken_email_rejected(self, repos):
        with pytest.raises(ValidationError, match="Email already exists"):
            UpdateUserHandler(repos.users).handle("1", email="BOB@example.com")

    def test_update_rejects_malformed_email(self, repos):
        with pytest.raises(ValidationError, match="Invalid email"):
            UpdateUserHandler(repos.users).handle("1", email="not-an-email")

    def test_delete(self, repos):
        DeleteUserHandler(repos.users, repos.orders).handle("2")
        assert repos.users.get_by_id("2") is None

    def test_delete_refused_while_user_has_orders(self, repos):
        place_order(repos, user_id="1")
        with pytest.raises(InvalidStateError, match="1 order"):
            DeleteUserHandler(repos.users, repos.orders).handle("1")
        assert repos.users.get_by_id("1") is not None

    def test_delete_unknown(self, repos):
        with pytest.raises(EntityNotFoundError):
            DeleteUserHandler(repos.users, repos.orders).handle("42")
