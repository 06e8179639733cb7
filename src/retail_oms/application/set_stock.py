"""Application service: Set Stock use case (restocking)."""

from __future__ import annotations

from retail_oms.domain.model.product import Product
from retail_oms.domain.repository.product_repository import ProductRepository
from retail_oms.domain.service.stock_service import StockService


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._stock = StockService(product_repo)

    def handle(self, product_id: str, quantity: int) -> Product:
        """Set the absolute stock level for a product."""
        return self._stock.update_stock(product_id, quantity)
