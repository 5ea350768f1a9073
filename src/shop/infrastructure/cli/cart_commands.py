"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from shop.application.add_cart_item import AddCartItemHandler
from shop.application.create_cart import CreateCartHandler
from shop.application.show_cart import ShowCartHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import repositories


@click.command("create")
def cart_create() -> None:
    """Create an empty cart."""
    handler = CreateCartHandler(cart_repo=repositories().carts)

    try:
        cart = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart.id} created")


@click.command("add")
@click.option("--cart", "cart_id", required=True, help="Cart ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_add(cart_id: str, product_id: str) -> None:
    """Add one unit of a product to a cart."""
    repos = repositories()
    handler = AddCartItemHandler(cart_repo=repos.carts, product_repo=repos.products)

    try:
        cart = handler.handle(cart_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} added to cart #{cart.id} ({len(cart.items)} line items)")


@click.command("show")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
def cart_show(cart_id: str) -> None:
    """Show the contents of a cart."""
    repos = repositories()
    handler = ShowCartHandler(cart_repo=repos.carts, product_repo=repos.products)

    try:
        view = handler.handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if view is None:
        raise click.ClickException(f"Cart with ID '{cart_id}' not found")

    click.echo(f"Cart #{view.id}")
    if not view.items:
        click.echo("  (empty)")
        return

    click.echo(f"  {'Product':<26} {'Title':<24} {'Qty':>5}")
    click.echo(f"  {'-'*57}")
    for line in view.items:
        title = line.product.title if line.product else "(deleted)"
        click.echo(f"  {str(line.product_id):<26} {title:<24} {line.quantity:>5}")
