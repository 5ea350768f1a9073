"""Application service: Show Product use case (query)."""

from __future__ import annotations

from shop.domain.model.product import Product
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: object) -> Product | None:
        """Return the product, or None. Absence is a normal outcome here."""
        return self._product_repo.get_by_id(EntityId.of(product_id))
