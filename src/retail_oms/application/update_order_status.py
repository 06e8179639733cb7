"""Application service: Update Order Status use case.

Moves an order along the status transition table.  Requesting the
current status is accepted and still saves the order.  The confirm,
ship and deliver handlers are fixed-target shortcuts.
"""

from __future__ import annotations

import structlog

from retail_oms.application.dto import OrderDTO, to_order_dto
from retail_oms.domain.exceptions import EntityNotFoundError
from retail_oms.domain.model.order import OrderStatus
from retail_oms.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, new_status: OrderStatus) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with id: {order_id}")

        previous = order.status
        order.transition_to(new_status)
        self._order_repo.save(order)

        logger.info(
            "Order status updated",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
        )
        return to_order_dto(order)


class _FixedStatusHandler:

    target: OrderStatus

    def __init__(self, order_repo: OrderRepository) -> None:
        self._update = UpdateOrderStatusHandler(order_repo)

    def handle(self, order_id: int) -> OrderDTO:
        return self._update.handle(order_id, self.target)


class ConfirmOrderHandler(_FixedStatusHandler):
    target = OrderStatus.CONFIRMED


class ShipOrderHandler(_FixedStatusHandler):
    target = OrderStatus.SHIPPED


class DeliverOrderHandler(_FixedStatusHandler):
    target = OrderStatus.DELIVERED
