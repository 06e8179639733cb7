"""Application service: Cancel Order use case.

Stock is only ever reserved while an order is PENDING (when items are
added), so a CONFIRMED order's items always correspond to reserved
units; those are given back before cancelling.  PENDING orders are
cancelled without touching stock.  SHIPPED and DELIVERED orders can
never be cancelled.
"""

from __future__ import annotations

import structlog

from retail_oms.application.dto import OrderDTO
from retail_oms.application.update_order_status import UpdateOrderStatusHandler
from retail_oms.domain.exceptions import EntityNotFoundError, InvalidStateError
from retail_oms.domain.model.order import NON_CANCELLABLE_STATUSES, OrderStatus
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.product_repository import ProductRepository
from retail_oms.domain.service.stock_service import StockService

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with id: {order_id}")

        if order.status in NON_CANCELLABLE_STATUSES:
            raise InvalidStateError(
                f"Cannot cancel order #{order_id} — it has already been "
                f"{order.status.value.lower()}"
            )

        if order.status == OrderStatus.CONFIRMED:
            StockService(self._product_repo).restore_for_order(order)
            logger.info("Stock restored for cancelled order", order_id=order_id)

        return UpdateOrderStatusHandler(self._order_repo).handle(
            order_id, OrderStatus.CANCELLED
        )
