"""Application service: Delete Order use case."""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import EntityNotFoundError, InvalidStateError
from retail_oms.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        """Delete a PENDING or CANCELLED order along with its items."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with id: {order_id}")

        if not order.is_deletable:
            raise InvalidStateError(
                f"Cannot delete order #{order_id} in {order.status.value} status "
                f"— only PENDING or CANCELLED orders can be deleted"
            )

        self._order_repo.delete_by_id(order_id)
        logger.info("Order deleted", order_id=order_id, status=order.status.value)
