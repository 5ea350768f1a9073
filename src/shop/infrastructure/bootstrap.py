"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and receives the
repositories it needs as constructor arguments.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.config import Settings, load_settings
from shop.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shop.infrastructure.persistence.mongo import connect, ensure_indexes
from shop.infrastructure.persistence.mongo_cart_repository import MongoCartRepository
from shop.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from shop.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Repositories:
    products: ProductRepository
    carts: CartRepository


def build_repositories(settings: Settings) -> Repositories:
    if settings.storage == "mongo":
        _, db = connect(settings.mongodb_uri, settings.mongodb_database)
        ensure_indexes(db)
        return Repositories(
            products=MongoProductRepository(db),
            carts=MongoCartRepository(db),
        )

    logger.info(f"Using JSON file storage in {settings.data_dir}")
    return Repositories(
        products=JsonProductRepository(settings.data_dir / "products.json"),
        carts=JsonCartRepository(settings.data_dir / "carts.json"),
    )


def repositories() -> Repositories:
    return build_repositories(load_settings())
