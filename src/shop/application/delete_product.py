"""Application service: Delete Product use case.

Carts referencing the product are left alone: their line items keep
pointing at the deleted id.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.product_repository import ProductRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: object) -> Product:
        deleted = self._product_repo.delete(EntityId.of(product_id))
        if deleted is None:
            raise EntityNotFoundError("Product not found")
        logger.info(f"Product {deleted.id} deleted")
        return deleted
