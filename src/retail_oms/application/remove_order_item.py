"""Application service: Remove Item from Order use case.

The reverse of adding an item: the line leaves the order and its units
go back to the product's stock.  Only PENDING orders can be edited.
"""

from __future__ import annotations

import structlog

from retail_oms.application.dto import OrderDTO, to_order_dto
from retail_oms.domain.exceptions import EntityNotFoundError, InvalidStateError
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.product_repository import ProductRepository
from retail_oms.domain.service.stock_service import StockService

logger = structlog.get_logger(__name__)


class RemoveOrderItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._stock = StockService(product_repo)

    def handle(self, order_id: int, item_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with id: {order_id}")

        if not order.is_pending:
            raise InvalidStateError(
                f"Cannot modify order #{order_id} — status is "
                f"{order.status.value}, expected PENDING"
            )

        item = order.find_item(item_id)
        if item is None:
            raise EntityNotFoundError(
                f"Item #{item_id} not found in order #{order_id}"
            )

        self._stock.restore(item.product_id, item.quantity.value)
        order.remove_item(item)
        self._order_repo.save(order)

        logger.info(
            "Order item removed",
            order_id=order.id,
            item_id=item_id,
            product_id=item.product_id,
            total=str(order.total_amount),
        )
        return to_order_dto(order)
