"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry query results from the application layer to the HTTP and CLI
layers without those layers reaching into repositories.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.product import Product
from shop.domain.model.value_objects import EntityId


@dataclass(frozen=True)
class ProductPage:
    """Output: one page of a catalog query plus navigation metadata."""

    items: list[Product]
    total: int
    page: int
    limit: int
    total_pages: int

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def prev_page(self) -> int | None:
        return self.page - 1 if self.has_prev_page else None

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.has_next_page else None


@dataclass(frozen=True)
class CartLineView:
    """Output: a line item, with its product joined in when requested.

    ``product`` is None when the referenced product no longer exists or
    when the cart was read without resolving products.
    """

    product_id: EntityId
    quantity: int
    product: Product | None = None


@dataclass(frozen=True)
class CartView:
    id: EntityId
    items: list[CartLineView]
