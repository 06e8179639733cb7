"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  Items point
back at their order by id only, so the object graph stays acyclic and an
order can be serialized without special handling.

The aggregate keeps ``total_amount`` consistent with its items.  Status
and stock rules that involve other aggregates (products, users) are
coordinated by the application handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from retail_oms.domain.exceptions import InvalidTransitionError, ValidationError
from retail_oms.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from retail_oms.domain.model.user import User


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


# ---------------------------------------------------------------------------
# Transition table (self-transitions are handled separately as no-ops)
# ---------------------------------------------------------------------------
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

DELETABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CANCELLED})
NON_CANCELLABLE_STATUSES = frozenset({OrderStatus.SHIPPED, OrderStatus.DELIVERED})


def validate_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Raise InvalidTransitionError unless *requested* is reachable.

    A transition to the current status is always accepted.
    """
    if current == requested:
        return
    if requested not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(current, requested)


@dataclass(eq=False)
class OrderItem:
    """One product line in an order.

    ``unit_price`` is captured when the item is added and never re-read
    from the product afterwards.  ``order_id`` is a lookup key back to the
    owning order; it is cleared when the item is removed.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money
    id: int | None = None
    order_id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces the
    creation rules.  ``__init__`` stays simple so the repository can
    reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: str
    shipping_address: str
    status: OrderStatus = OrderStatus.PENDING
    items: list[OrderItem] = field(default_factory=list)
    total_amount: Money = field(default_factory=Money.zero)
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user: User | None, shipping_address: str | None) -> Order:
        if user is None:
            raise ValidationError("User is required")
        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Shipping address cannot be blank")
        return Order(id=None, user_id=user.id, shipping_address=shipping_address.strip())

    # --- Item mutation --------------------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        """Append *item* and take ownership of it.

        No status or stock checks happen here.
        """
        if item.id is None:
            item.id = self._next_item_id()
        item.order_id = self.id
        self.items.append(item)
        self.recompute_total()

    def remove_item(self, item: OrderItem) -> None:
        """Detach *item* if it belongs to this order; otherwise do nothing."""
        for index, existing in enumerate(self.items):
            if existing is item:
                del self.items[index]
                item.order_id = None
                self.recompute_total()
                return

    def find_item(self, item_id: int) -> OrderItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def recompute_total(self) -> None:
        total = Money.zero()
        for item in self.items:
            total = total + item.line_total
        self.total_amount = total

    # --- State transitions ----------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        validate_transition(self.status, new_status)
        self.status = new_status

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def is_deletable(self) -> bool:
        return self.status in DELETABLE_STATUSES

    # --- Internal helpers -----------------------------------------------------

    def _next_item_id(self) -> int:
        ids = [item.id for item in self.items if item.id is not None]
        return max(ids, default=0) + 1
