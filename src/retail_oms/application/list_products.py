"""Application service: catalog listings (queries)."""

from __future__ import annotations

from retail_oms.domain.model.product import Product
from retail_oms.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def all(self) -> list[Product]:
        return self._product_repo.list_all()

    def by_category(self, category: str) -> list[Product]:
        wanted = category.strip().lower()
        return [p for p in self._product_repo.list_all() if p.category.lower() == wanted]

    def available(self) -> list[Product]:
        """Products with at least one unit in stock."""
        return [p for p in self._product_repo.list_all() if p.stock_quantity > 0]

    def categories(self) -> list[str]:
        return sorted({p.category for p in self._product_repo.list_all()})
