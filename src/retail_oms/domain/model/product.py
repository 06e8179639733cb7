"""Product aggregate.

Products live independently of orders. They own the authoritative stock
count; order code only ever changes it through ``StockService``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from retail_oms.domain.exceptions import ValidationError
from retail_oms.domain.model.value_objects import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is strictly positive
    - ``stock_quantity`` is never negative

    ``version`` is bumped by the repository on every successful save and
    is how concurrent stock writes are detected.
    """

    id: str
    name: str
    price: Money
    stock_quantity: int
    category: str
    sku: str
    description: str = ""
    image_url: str | None = None
    version: int = 0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        stock_quantity: int,
        category: str,
        sku: str,
        description: str = "",
        image_url: str | None = None,
    ) -> Product:
        """Create a new catalog product, enforcing all field rules."""
        if not name or not name.strip():
            raise ValidationError("Product name cannot be blank")
        if price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        if stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        if not category or not category.strip():
            raise ValidationError("Product category cannot be blank")
        if not sku or not sku.strip():
            raise ValidationError("Product SKU cannot be blank")
        return Product(
            id=id,
            name=name.strip(),
            price=price,
            stock_quantity=stock_quantity,
            category=category.strip(),
            sku=sku.strip(),
            description=description,
            image_url=image_url,
        )

    def is_available(self, quantity: int) -> bool:
        return self.stock_quantity >= quantity

    def set_stock(self, new_quantity: int) -> None:
        """Replace the stock level with an absolute value."""
        if new_quantity < 0:
            raise ValidationError(
                f"Stock quantity for {self.name} cannot be negative, got {new_quantity}"
            )
        self.stock_quantity = new_quantity
        self.updated_at = _utcnow()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing order items keep the unit price they captured when added.
        """
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
        self.updated_at = _utcnow()

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        sku: str | None = None,
        image_url: str | None = None,
    ) -> None:
        """Overwrite the catalog fields that were given.

        Blank values are ignored, as they are for a partial edit form.
        SKU uniqueness is the caller's concern.
        """
        if name and name.strip():
            self.name = name.strip()
        if description and description.strip():
            self.description = description.strip()
        if category and category.strip():
            self.category = category.strip()
        if sku and sku.strip():
            self.sku = sku.strip()
        if image_url and image_url.strip():
            self.image_url = image_url.strip()
        self.updated_at = _utcnow()
