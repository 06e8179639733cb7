"""Builders used by several application-layer test modules."""

from retail_oms.application.add_order_item import AddOrderItemHandler
from retail_oms.application.create_order import CreateOrderHandler
from retail_oms.domain.model.order import OrderStatus


def place_order(repos, items=(), user_id="1", address="123 Main St") -> int:
    """Create an order for *user_id* and add ``(product_id, qty)`` *items*."""
    dto = CreateOrderHandler(repos.orders, repos.users).handle(user_id, address)
    add = AddOrderItemHandler(repos.orders, repos.products)
    for product_id, qty in items:
        add.handle(dto.id, product_id, qty)
    return dto.id


def force_status(repos, order_id: int, status: OrderStatus) -> None:
    """Put an order straight into *status*, bypassing the transition table."""
    order = repos.orders.get_by_id(order_id)
    order.status = status
    repos.orders.save(order)
