"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from retail_oms.domain.exceptions import ConcurrencyError
from retail_oms.domain.model.product import Product
from retail_oms.domain.model.value_objects import Money
from retail_oms.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        products = self._load()
        if not products:
            return "1"
        return str(max(int(pid) for pid in products) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_sku(self, sku: str) -> Product | None:
        for product in self._load().values():
            if product.sku == sku:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()

        stored = products.get(product.id)
        stored_version = stored.version if stored is not None else 0
        if product.version != stored_version:
            raise ConcurrencyError(
                f"Product {product.id} was modified concurrently "
                f"(expected version {product.version}, found {stored_version})"
            )

        product.version += 1
        products[product.id] = product
        self._persist(products)

    def delete_by_id(self, product_id: str) -> None:
        products = self._load()
        products.pop(product_id, None)
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                stock_quantity=item["stock_quantity"],
                category=item["category"],
                sku=item["sku"],
                description=item.get("description", ""),
                image_url=item.get("image_url"),
                version=item.get("version", 0),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "stock_quantity": p.stock_quantity,
                "category": p.category,
                "sku": p.sku,
                "image_url": p.image_url,
                "version": p.version,
                "created_at": p.created_at.isoformat(),
                "updated_at": p.updated_at.isoformat(),
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
