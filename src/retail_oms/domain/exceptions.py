"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly.  ``EntityNotFoundError`` is the
only kind reported as a missing resource; every other kind is reported as
bad input.  None of them is retried by the application layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retail_oms.domain.model.order import OrderStatus


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied input failed a precondition."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidStateError(DomainException):
    """The operation is not permitted in the order's current status."""


class InvalidTransitionError(DomainException):
    """The requested status is not reachable from the current one."""

    def __init__(self, current: OrderStatus, requested: OrderStatus) -> None:
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid status transition from {current.value} to {requested.value}"
        )


class InsufficientStockError(DomainException):
    """Requested quantity exceeds the product's stock at check time."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name} "
            f"(need {requested}, have {available})"
        )


class ConcurrencyError(DomainException):
    """A write was based on a stale read of the record."""
