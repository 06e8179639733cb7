"""Integration tests for status changes, cancellation and deletion."""

import itertools

import pytest

from retail_oms.application.add_order_item import AddOrderItemHandler
from retail_oms.application.cancel_order import CancelOrderHandler
from retail_oms.application.delete_order import DeleteOrderHandler
from retail_oms.application.update_order_status import (
    ConfirmOrderHandler,
    DeliverOrderHandler,
    ShipOrderHandler,
    UpdateOrderStatusHandler,
)
from retail_oms.domain.exceptions import (
    EntityNotFoundError,
    InvalidStateError,
    InvalidTransitionError,
)
from retail_oms.domain.model.order import OrderStatus
from retail_oms.domain.model.value_objects import Money
from tests.application.helpers import force_status, place_order

ALLOWED = {
    (OrderStatus.PENDING, OrderStatus.CONFIRMED),
    (OrderStatus.PENDING, OrderStatus.CANCELLED),
    (OrderStatus.CONFIRMED, OrderStatus.SHIPPED),
    (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
}


class TestUpdateOrderStatus:

    @pytest.mark.parametrize(
        "current,requested", list(itertools.product(OrderStatus, OrderStatus))
    )
    def test_transition_matrix(self, repos, current, requested):
        order_id = place_order(repos)
        force_status(repos, order_id, current)
        handler = UpdateOrderStatusHandler(repos.orders)

        if current == requested or (current, requested) in ALLOWED:
            dto = handler.handle(order_id, requested)
            assert dto.status == requested.value
            assert repos.orders.get_by_id(order_id).status == requested
        else:
            with pytest.raises(InvalidTransitionError):
                handler.handle(order_id, requested)
            assert repos.orders.get_by_id(order_id).status == current

    def test_self_transition_still_saves(self, repos):
        order_id = place_order(repos)
        saves_before = repos.orders.save_count

        UpdateOrderStatusHandler(repos.orders).handle(order_id, OrderStatus.PENDING)

        assert repos.orders.save_count == saves_before + 1

    def test_unknown_order(self, repos):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(repos.orders).handle(999, OrderStatus.CONFIRMED)

    def test_shortcuts_walk_the_happy_path(self, repos):
        order_id = place_order(repos, [("1", 1)])

        assert ConfirmOrderHandler(repos.orders).handle(order_id).status == "CONFIRMED"
        assert ShipOrderHandler(repos.orders).handle(order_id).status == "SHIPPED"
        assert DeliverOrderHandler(repos.orders).handle(order_id).status == "DELIVERED"

    def test_cannot_ship_a_pending_order(self, repos):
        order_id = place_order(repos)
        with pytest.raises(InvalidTransitionError, match="PENDING to SHIPPED"):
            ShipOrderHandler(repos.orders).handle(order_id)

    def test_status_changes_do_not_touch_stock(self, repos):
        order_id = place_order(repos, [("1", 4)])
        ConfirmOrderHandler(repos.orders).handle(order_id)
        ShipOrderHandler(repos.orders).handle(order_id)
        DeliverOrderHandler(repos.orders).handle(order_id)
        assert repos.products.stock_of("1") == 6


class TestCancelOrder:

    def test_confirmed_order_restores_stock(self, repos):
        order_id = place_order(repos, [("1", 3), ("2", 2)])
        ConfirmOrderHandler(repos.orders).handle(order_id)

        dto = CancelOrderHandler(repos.orders, repos.products).handle(order_id)

        assert dto.status == "CANCELLED"
        assert repos.products.stock_of("1") == 10
        assert repos.products.stock_of("2") == 5

    def test_pending_order_leaves_stock_alone(self, repos):
        order_id = place_order(repos, [("1", 3)])

        CancelOrderHandler(repos.orders, repos.products).handle(order_id)

        assert repos.orders.get_by_id(order_id).status == OrderStatus.CANCELLED
        assert repos.products.stock_of("1") == 7

    @pytest.mark.parametrize("status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED])
    def test_shipped_or_delivered_rejected(self, repos, status):
        order_id = place_order(repos, [("1", 3)])
        force_status(repos, order_id, status)

        with pytest.raises(InvalidStateError, match="Cannot cancel"):
            CancelOrderHandler(repos.orders, repos.products).handle(order_id)

        assert repos.orders.get_by_id(order_id).status == status
        assert repos.products.stock_of("1") == 7

    def test_cancelling_twice_is_a_noop(self, repos):
        order_id = place_order(repos, [("1", 3)])
        ConfirmOrderHandler(repos.orders).handle(order_id)
        handler = CancelOrderHandler(repos.orders, repos.products)

        handler.handle(order_id)
        handler.handle(order_id)

        assert repos.products.stock_of("1") == 10

    def test_unknown_order(self, repos):
        with pytest.raises(EntityNotFoundError):
            CancelOrderHandler(repos.orders, repos.products).handle(999)


class TestDeleteOrder:

    @pytest.mark.parametrize("status", [OrderStatus.PENDING, OrderStatus.CANCELLED])
    def test_deletable_statuses(self, repos, status):
        order_id = place_order(repos, [("1", 1)])
        force_status(repos, order_id, status)

        DeleteOrderHandler(repos.orders).handle(order_id)

        assert repos.orders.get_by_id(order_id) is None

    @pytest.mark.parametrize(
        "status", [OrderStatus.CONFIRMED, OrderStatus.SHIPPED, OrderStatus.DELIVERED]
    )
    def test_other_statuses_rejected(self, repos, status):
        order_id = place_order(repos, [("1", 1)])
        force_status(repos, order_id, status)

        with pytest.raises(InvalidStateError, match="Cannot delete"):
            DeleteOrderHandler(repos.orders).handle(order_id)

        assert repos.orders.get_by_id(order_id) is not None

    def test_unknown_order(self, repos):
        with pytest.raises(EntityNotFoundError):
            DeleteOrderHandler(repos.orders).handle(999)


class TestScenarios:

    def test_order_confirm_cancel_round_trip(self, repos):
        order_id = place_order(repos, user_id="1", address="123 Main St")
        order = repos.orders.get_by_id(order_id)
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Money.zero()

        AddOrderItemHandler(repos.orders, repos.products).handle(order_id, "1", 2)
        assert repos.orders.get_by_id(order_id).total_amount == Money.of("100.00")
        assert repos.products.stock_of("1") == 8

        ConfirmOrderHandler(repos.orders).handle(order_id)
        assert repos.orders.get_by_id(order_id).status == OrderStatus.CONFIRMED

        CancelOrderHandler(repos.orders, repos.products).handle(order_id)
        assert repos.orders.get_by_id(order_id).status == OrderStatus.CANCELLED
        assert repos.products.stock_of("1") == 10
