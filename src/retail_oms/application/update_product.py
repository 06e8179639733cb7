"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from retail_oms.domain.exceptions import EntityNotFoundError, ValidationError
from retail_oms.domain.model.product import Product
from retail_oms.domain.model.value_objects import Money
from retail_oms.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        sku: str | None = None,
        image_url: str | None = None,
    ) -> Product:
        """Edit a product's catalog fields; omitted or blank fields are kept.

        A price change does NOT affect existing orders; their items
        captured a unit price when they were added.  Stock is not edited
        here; see ``SetStockHandler``.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        if sku and sku.strip() and sku.strip() != product.sku:
            if self._product_repo.get_by_sku(sku.strip()) is not None:
                raise ValidationError(f"Product with SKU already exists: {sku.strip()}")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        product.update_details(
            name=name,
            description=description,
            category=category,
            sku=sku,
            image_url=image_url,
        )
        self._product_repo.save(product)
        logger.info("Product updated", product_id=product.id, sku=product.sku)
        return product
