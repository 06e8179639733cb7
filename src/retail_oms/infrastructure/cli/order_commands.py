"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from retail_oms.application.add_order_item import AddOrderItemHandler
from retail_oms.application.cancel_order import CancelOrderHandler
from retail_oms.application.create_order import CreateOrderHandler
from retail_oms.application.delete_order import DeleteOrderHandler
from retail_oms.application.dto import OrderDTO
from retail_oms.application.list_orders import ListOrdersHandler
from retail_oms.application.remove_order_item import RemoveOrderItemHandler
from retail_oms.application.show_order import ShowOrderHandler
from retail_oms.application.update_order_status import (
    ConfirmOrderHandler,
    DeliverOrderHandler,
    ShipOrderHandler,
    UpdateOrderStatusHandler,
)
from retail_oms.domain.model.order import OrderStatus
from retail_oms.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)
from retail_oms.infrastructure.cli.errors import domain_errors

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Placed:   {dto.order_date}")
    click.echo()

    if not dto.items:
        click.echo("  (no items)")
    else:
        click.echo(f"  {'#':<4} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
        click.echo(f"  {'-'*52}")
        for item in dto.items:
            click.echo(
                f"  {item.id:<4} {item.product_name:<20} {item.quantity:>5} "
                f"{item.unit_price:>10} {item.line_total:>10}"
            )
        click.echo(f"  {'-'*52}")

    click.echo(f"  {'Order Total':<32} {dto.total:>20}")


@click.command("create")
@click.option("--user", "user_id", required=True, help="ID of the ordering user.")
@click.option("--address", required=True, help="Shipping address.")
def order_create(user_id: str, address: str) -> None:
    """Create a new, empty PENDING order."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
    )

    with domain_errors():
        dto = handler.handle(user_id=user_id, shipping_address=address)

    click.echo(f"Order #{dto.id} created  (status={dto.status})")


@click.command("add-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to order.")
def order_add_item(order_id: int, product_id: str, quantity: int) -> None:
    """Add a product line to a pending order (reserves stock)."""
    handler = AddOrderItemHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    with domain_errors():
        dto = handler.handle(order_id, product_id, quantity)

    _display_order(dto)


@click.command("remove-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--item", "item_id", required=True, type=int, help="Item number within the order.")
def order_remove_item(order_id: int, item_id: int) -> None:
    """Remove a line from a pending order (restores stock)."""
    handler = RemoveOrderItemHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    with domain_errors():
        dto = handler.handle(order_id, item_id)

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--to", "new_status", required=True, type=_STATUS_CHOICE, help="Target status.")
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to another status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    with domain_errors():
        dto = handler.handle(order_id, OrderStatus(new_status.upper()))

    click.echo(f"Order #{order_id} is now {dto.status}.")


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
def order_confirm(order_id: int) -> None:
    """Confirm a pending order."""
    with domain_errors():
        ConfirmOrderHandler(order_repo=order_repository()).handle(order_id)

    click.echo(f"Order #{order_id} confirmed.")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to ship.")
def order_ship(order_id: int) -> None:
    """Mark a confirmed order as shipped."""
    with domain_errors():
        ShipOrderHandler(order_repo=order_repository()).handle(order_id)

    click.echo(f"Order #{order_id} shipped.")


@click.command("deliver")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to deliver.")
def order_deliver(order_id: int) -> None:
    """Mark a shipped order as delivered."""
    with domain_errors():
        DeliverOrderHandler(order_repo=order_repository()).handle(order_id)

    click.echo(f"Order #{order_id} delivered.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order (restores stock if it was confirmed)."""
    handler = CancelOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    with domain_errors():
        handler.handle(order_id)

    click.echo(f"Order #{order_id} cancelled.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete a pending or cancelled order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    with domain_errors():
        handler.handle(order_id)

    click.echo(f"Order #{order_id} deleted.")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    with domain_errors():
        dto = handler.handle(order_id)

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only orders of this user.")
@click.option("--status", default=None, type=_STATUS_CHOICE, help="Only orders in this status.")
@click.option("--since", default=None, type=click.DateTime(), help="Placed at or after (UTC).")
@click.option("--until", default=None, type=click.DateTime(), help="Placed at or before (UTC).")
def order_list(
    user_id: str | None,
    status: str | None,
    since: datetime | None,
    until: datetime | None,
) -> None:
    """List orders, optionally filtered by user, status or date range."""
    handler = ListOrdersHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
    )

    with domain_errors():
        if user_id is not None:
            orders = handler.by_user(user_id)
        elif status is not None:
            orders = handler.by_status(OrderStatus(status.upper()))
        elif since is not None or until is not None:
            orders = handler.by_date_range(since or datetime.min, until or datetime.max)
        else:
            orders = handler.all()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<8} {'Status':<10} {'Items':>5} {'Total':>12}")
    click.echo("-" * 45)
    for o in orders:
        click.echo(f"{o.id:<6} {o.user_id:<8} {o.status:<10} {len(o.items):>5} {o.total:>12}")
