"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from retail_oms.application.add_product import AddProductHandler
from retail_oms.application.delete_product import DeleteProductHandler
from retail_oms.application.list_products import ListProductsHandler
from retail_oms.application.set_stock import SetStockHandler
from retail_oms.application.show_product import ShowProductHandler
from retail_oms.application.update_product import UpdateProductHandler
from retail_oms.infrastructure.bootstrap import order_repository, product_repository
from retail_oms.infrastructure.cli.errors import domain_errors


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", "stock_quantity", required=True, type=int, help="Units in stock.")
@click.option("--category", required=True, help="Catalog category.")
@click.option("--sku", required=True, help="Unique stock keeping unit.")
@click.option("--description", default="", help="Free-text description.")
def product_add(
    name: str,
    price: str,
    stock_quantity: int,
    category: str,
    sku: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    with domain_errors():
        product = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            category=category,
            sku=sku,
            description=description,
        )

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock_quantity} in stock)"
    )


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
@click.option("--available", is_flag=True, help="Only show products in stock.")
def product_list(category: str | None, available: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.by_category(category) if category is not None else handler.all()
    if available:
        products = [p for p in products if p.stock_quantity > 0]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<12} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 74)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.sku:<12} {p.name:<20} {p.category:<14} "
            f"{str(p.price):>10} {p.stock_quantity:>7}"
        )


@click.command("categories")
def product_categories() -> None:
    """List the distinct catalog categories."""
    categories = ListProductsHandler(product_repo=product_repository()).categories()
    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(category)


@click.command("show")
@click.option("--id", "product_id", default=None, help="Product ID.")
@click.option("--sku", default=None, help="Stock keeping unit.")
def product_show(product_id: str | None, sku: str | None) -> None:
    """Show one product, looked up by ID or SKU."""
    if (product_id is None) == (sku is None):
        raise click.UsageError("Give exactly one of --id or --sku.")
    handler = ShowProductHandler(product_repo=product_repository())

    with domain_errors():
        product = handler.by_id(product_id) if product_id is not None else handler.by_sku(sku)

    click.echo(f"Product #{product.id}  {product.name}  [{product.sku}]")
    click.echo(f"  category={product.category}  price={product.price}  stock={product.stock_quantity}")
    if product.description:
        click.echo(f"  {product.description}")
    if product.image_url:
        click.echo(f"  image={product.image_url}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@click.option("--sku", default=None, help="New unique SKU.")
@click.option("--image-url", default=None, help="New image URL.")
def product_update(
    product_id: str,
    price: str | None,
    name: str | None,
    description: str | None,
    category: str | None,
    sku: str | None,
    image_url: str | None,
) -> None:
    """Update a product's catalog fields."""
    handler = UpdateProductHandler(product_repo=product_repository())

    with domain_errors():
        product = handler.handle(
            product_id=product_id,
            new_price=price,
            name=name,
            description=description,
            category=category,
            sku=sku,
            image_url=image_url,
        )

    click.echo(
        f"Product #{product_id} updated: '{product.name}' [{product.sku}] at {product.price}"
    )


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New absolute stock level.")
def product_stock(product_id: str, quantity: int) -> None:
    """Set the stock level of a product."""
    handler = SetStockHandler(product_repo=product_repository())

    with domain_errors():
        product = handler.handle(product_id=product_id, quantity=quantity)

    click.echo(f"Stock for '{product.name}' set to {product.stock_quantity}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        order_repo=order_repository(),
    )

    with domain_errors():
        handler.handle(product_id)

    click.echo(f"Product #{product_id} deleted")
