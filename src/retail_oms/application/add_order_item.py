"""Application service: Add Item to Order use case.

Touches two aggregates: the order gains a line and the product loses the
same number of units of stock.  Every check runs before the first write,
so a rejected request leaves both untouched.  If the final order save
fails after the stock was decremented, nothing is undone here; keeping
the two writes together is the job of the store's transaction scope.
"""

from __future__ import annotations

import structlog

from retail_oms.application.dto import OrderDTO, to_order_dto
from retail_oms.domain.exceptions import EntityNotFoundError, InvalidStateError
from retail_oms.domain.model.order import OrderItem
from retail_oms.domain.model.value_objects import Quantity
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.product_repository import ProductRepository
from retail_oms.domain.service.stock_service import StockService

logger = structlog.get_logger(__name__)


class AddOrderItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._stock = StockService(product_repo)

    def handle(self, order_id: int, product_id: str, quantity: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with id: {order_id}")

        if not order.is_pending:
            raise InvalidStateError(
                f"Cannot modify order #{order_id} — status is "
                f"{order.status.value}, expected PENDING"
            )

        product = self._stock.get_product(product_id)
        qty = Quantity(quantity)

        # Raises InsufficientStockError before any write
        self._stock.reserve(product, qty.value)

        item = OrderItem(
            product_id=product.id,
            product_name=product.name,
            quantity=qty,
            unit_price=product.price,  # <-- price snapshot
        )
        order.add_item(item)
        self._order_repo.save(order)

        logger.info(
            "Order item added",
            order_id=order.id,
            item_id=item.id,
            product_id=product.id,
            quantity=qty.value,
            total=str(order.total_amount),
        )
        return to_order_dto(order)
