import click

from retail_oms.infrastructure.cli.order_commands import (
    order_add_item,
    order_cancel,
    order_confirm,
    order_create,
    order_delete,
    order_deliver,
    order_list,
    order_remove_item,
    order_ship,
    order_show,
    order_status,
)
from retail_oms.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_delete,
    product_list,
    product_show,
    product_stock,
    product_update,
)
from retail_oms.infrastructure.cli.user_commands import (
    user_add,
    user_delete,
    user_list,
    user_show,
    user_update,
)
from retail_oms.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """OMS — Retail Order Management"""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_add_item)
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_deliver)
order.add_command(order_list)
order.add_command(order_remove_item)
order.add_command(order_ship)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_categories)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_update)
user.add_command(user_add)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_show)
user.add_command(user_update)


def main() -> None:
    """Console entry point."""
    configure_logging()
    cli()
