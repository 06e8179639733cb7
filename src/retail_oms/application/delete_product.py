"""Application service: Delete Product use case.

A product still held by a PENDING or CONFIRMED order keeps its record:
those orders may yet be cancelled, and cancelling gives the reserved
units back to the product.
"""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import EntityNotFoundError, InvalidStateError
from retail_oms.domain.model.order import OrderStatus
from retail_oms.domain.repository.order_repository import OrderRepository
from retail_oms.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

_OPEN_STATUSES = (OrderStatus.PENDING, OrderStatus.CONFIRMED)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self, product_id: str) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        for status in _OPEN_STATUSES:
            for order in self._order_repo.find_by_status(status):
                if any(item.product_id == product_id for item in order.items):
                    raise InvalidStateError(
                        f"Cannot delete {product.name} — it is on "
                        f"{status.value} order #{order.id}"
                    )

        self._product_repo.delete_by_id(product_id)
        logger.info("Product deleted", product_id=product_id, sku=product.sku)
