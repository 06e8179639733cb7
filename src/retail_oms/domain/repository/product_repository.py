"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail_oms.domain.model.product import Product


class ProductRepository(ABC):
    """Store of products and their authoritative stock counts.

    Writes to the same product must be serialized.  Implementations
    enforce this with an optimistic version check: ``save()`` compares
    ``product.version`` with the stored version, raises
    ``ConcurrencyError`` on mismatch and increments the version on success.
    A stock update computed from a stale read therefore never commits.
    """

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return a product by its SKU, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (version-checked)."""

    @abstractmethod
    def delete_by_id(self, product_id: str) -> None:
        """Remove a product from the catalog."""
