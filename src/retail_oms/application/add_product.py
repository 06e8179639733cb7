"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import ValidationError
from retail_oms.domain.model.product import Product
from retail_oms.domain.model.value_objects import Money
from retail_oms.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        stock_quantity: int,
        category: str,
        sku: str,
        description: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if sku and self._product_repo.get_by_sku(sku.strip()) is not None:
            raise ValidationError(f"Product with SKU already exists: {sku}")

        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            price=Money.of(price),
            stock_quantity=stock_quantity,
            category=category,
            sku=sku,
            description=description,
        )
        self._product_repo.save(product)
        logger.info("Product added", product_id=product.id, sku=product.sku)
        return product
