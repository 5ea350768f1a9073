"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any, Mapping

from shop.domain.exceptions import ConflictError, EntityNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.product_repository import ProductRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: object, changes: Mapping[str, Any] | None) -> Product:
        """Patch a product with the supplied fields.

        Unspecified fields keep their values and a client-supplied ``id`` is
        dropped. Changing ``code`` to one held by *another* product fails.
        """
        product = self._product_repo.get_by_id(EntityId.of(product_id))
        if product is None:
            raise EntityNotFoundError("Product not found")

        changes = {k: v for k, v in (changes or {}).items() if k != "id"}
        updated = product.with_changes(changes)

        if "code" in changes:
            holder = self._product_repo.get_by_code(updated.code)
            if holder is not None and holder.id != product.id:
                raise ConflictError(f'Product code "{updated.code}" already exists')

        saved = self._product_repo.save(updated)
        logger.info(f"Product {saved.id} updated ({', '.join(sorted(changes)) or 'no fields'})")
        return saved
