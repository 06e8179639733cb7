"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from retail_oms.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order together with its items.

        Assigns an ID to new orders and returns the saved order.
        """

    @abstractmethod
    def delete_by_id(self, order_id: int) -> None:
        """Remove an order and all of its items."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def find_by_user(self, user_id: str) -> list[Order]:
        """Return the orders owned by a user."""

    @abstractmethod
    def find_by_status(self, status: OrderStatus) -> list[Order]:
        """Return the orders currently in *status*."""

    @abstractmethod
    def find_by_date_range(self, start: datetime, end: datetime) -> list[Order]:
        """Return orders placed between *start* and *end*, inclusive."""
