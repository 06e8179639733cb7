"""Domain service: product stock.

Every change the order workflow makes to a product's stock goes through
here.  Stock writes are absolute values computed from a fresh read; the
repository's version check rejects a write whose read went stale, so two
concurrent reservations can never both decrement the same stock level.
"""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import EntityNotFoundError, InsufficientStockError
from retail_oms.domain.model.order import Order
from retail_oms.domain.model.product import Product
from retail_oms.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")
        return product

    def is_available(self, product_id: str, quantity: int) -> bool:
        return self.get_product(product_id).is_available(quantity)

    def update_stock(self, product_id: str, new_quantity: int) -> Product:
        """Replace a product's stock with *new_quantity* (not a delta)."""
        product = self.get_product(product_id)
        previous = product.stock_quantity
        product.set_stock(new_quantity)
        self._product_repo.save(product)
        logger.info(
            "Stock updated",
            product_id=product_id,
            previous=previous,
            stock=new_quantity,
        )
        return product

    def reserve(self, product: Product, quantity: int) -> Product:
        """Decrement *product*'s stock by *quantity*.

        Raises InsufficientStockError without touching stock if the
        product does not have enough units.
        """
        if not product.is_available(quantity):
            raise InsufficientStockError(
                product.name, quantity, product.stock_quantity
            )
        product.set_stock(product.stock_quantity - quantity)
        self._product_repo.save(product)
        logger.info(
            "Stock reserved",
            product_id=product.id,
            quantity=quantity,
            stock=product.stock_quantity,
        )
        return product

    def restore(self, product_id: str, quantity: int) -> Product:
        """Give *quantity* units back to a product."""
        product = self.get_product(product_id)
        product.set_stock(product.stock_quantity + quantity)
        self._product_repo.save(product)
        logger.info(
            "Stock restored",
            product_id=product_id,
            quantity=quantity,
            stock=product.stock_quantity,
        )
        return product

    def restore_for_order(self, order: Order) -> None:
        """Return the stock reserved by every item of *order*."""
        for item in order.items:
            self.restore(item.product_id, item.quantity.value)
