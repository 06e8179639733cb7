"""Application service: Show Product use case (query)."""

from __future__ import annotations

from retail_oms.domain.exceptions import EntityNotFoundError
from retail_oms.domain.model.product import Product
from retail_oms.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_id(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")
        return product

    def by_sku(self, sku: str) -> Product:
        product = self._product_repo.get_by_sku(sku)
        if product is None:
            raise EntityNotFoundError(f"Product not found with SKU: {sku}")
        return product
