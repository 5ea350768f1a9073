import click
import uvicorn

from shop.infrastructure.bootstrap import build_repositories
from shop.infrastructure.cli.cart_commands import cart_add, cart_create, cart_show
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from shop.infrastructure.config import load_settings
from shop.infrastructure.web.app import create_app
from shop.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
def cli() -> None:
    """Shop: products and carts API"""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: $HOST).")
@click.option("--port", default=None, type=int, help="Port to listen on (default: $PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API and the realtime channel."""
    settings = load_settings()
    configure_logging(settings.log_level)

    repos = build_repositories(settings)
    app = create_app(repos.products, repos.carts)

    logger.info(f"Storage backend: {settings.storage}")
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_create)
cart.add_command(cart_show)
