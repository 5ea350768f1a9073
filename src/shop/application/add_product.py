"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any

from shop.domain.exceptions import ConflictError
from shop.domain.model.product import Product, ProductDraft
from shop.domain.repository.product_repository import ProductRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, payload: Any) -> Product:
        """Add a new product to the catalog.

        Steps:
        1. Validate every field in one pass (all offenders reported).
        2. Reject a ``code`` already held by another product.
        3. Persist; the repository assigns the id.
        """
        draft = ProductDraft.from_payload(payload)

        if self._product_repo.get_by_code(draft.code) is not None:
            raise ConflictError(f'Product code "{draft.code}" already exists')

        product = self._product_repo.add(Product.from_draft(draft))
        logger.info(f"Product {product.id} created with code '{product.code}'")
        return product
