"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shop.application.add_product import AddProductHandler
from shop.application.delete_product import DeleteProductHandler
from shop.application.list_products import ListProductsHandler, ProductQuery
from shop.application.show_product import ShowProductHandler
from shop.application.update_product import UpdateProductHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.product import Product
from shop.infrastructure.bootstrap import repositories


def _display_product(p: Product) -> None:
    click.echo(f"Product #{p.id}  code={p.code}  ({'active' if p.status else 'inactive'})")
    click.echo(f"Title:       {p.title}")
    click.echo(f"Description: {p.description}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Price:       {p.price}")
    click.echo(f"Stock:       {p.stock}")
    if p.thumbnails:
        click.echo(f"Thumbnails:  {', '.join(p.thumbnails)}")


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--code", required=True, help="Unique product code.")
@click.option("--price", required=True, type=float, help="Unit price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--category", required=True, help="Product category.")
@click.option("--inactive", is_flag=True, default=False, help="Create the product as inactive.")
@click.option("--thumbnail", "thumbnails", multiple=True, help="Thumbnail path (repeatable).")
def product_add(
    title: str,
    description: str,
    code: str,
    price: float,
    stock: int,
    category: str,
    inactive: bool,
    thumbnails: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=repositories().products)

    try:
        product = handler.handle({
            "title": title,
            "description": description,
            "code": code,
            "price": price,
            "status": not inactive,
            "stock": stock,
            "category": category,
            "thumbnails": list(thumbnails),
        })
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' added (code {product.code})")


@click.command("list")
@click.option("--page", default=None, help="Page number (default 1).")
@click.option("--limit", default=None, help="Products per page (default 10).")
@click.option("--sort", type=click.Choice(["asc", "desc"]), default=None, help="Sort by price.")
@click.option("--query", default=None, help="Filter: category:<v>, status:<v>, available or a category.")
def product_list(page: str | None, limit: str | None, sort: str | None, query: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=repositories().products)
    result = handler.handle(ProductQuery.parse(limit=limit, page=page, sort=sort, query=query))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Code':<12} {'Title':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 83)
    for p in result.items:
        click.echo(f"{str(p.id):<26} {p.code:<12} {p.title:<24} {p.price:>10} {p.stock:>7}")
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total} products)")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(product_repo=repositories().products)

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")
    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--title", default=None)
@click.option("--description", default=None)
@click.option("--code", default=None)
@click.option("--price", default=None, type=float)
@click.option("--stock", default=None, type=int)
@click.option("--category", default=None)
@click.option("--active/--inactive", "status", default=None)
def product_update(product_id: str, **fields) -> None:
    """Update some fields of a product."""
    changes = {name: value for name, value in fields.items() if value is not None}
    if not changes:
        raise click.ClickException("Nothing to update")

    handler = UpdateProductHandler(product_repo=repositories().products)

    try:
        product = handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: {', '.join(sorted(changes))}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product (carts holding it are left as they are)."""
    handler = DeleteProductHandler(product_repo=repositories().products)

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' deleted")
