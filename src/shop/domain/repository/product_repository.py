"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, MongoDB, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import PriceSort, Product, ProductCriteria
from shop.domain.model.value_objects import EntityId


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: EntityId) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """Return the product holding *code*, or None."""

    @abstractmethod
    def get_many(self, product_ids: list[EntityId]) -> list[Product]:
        """Return the products that exist among *product_ids*, in any order."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find(
        self,
        criteria: ProductCriteria,
        sort: PriceSort | None,
        offset: int,
        limit: int,
    ) -> list[Product]:
        """Return one page of products matching *criteria*."""

    @abstractmethod
    def count(self, criteria: ProductCriteria) -> int:
        """Count the products matching *criteria*."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned id."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist changes to an existing product and return the stored record."""

    @abstractmethod
    def delete(self, product_id: EntityId) -> Product | None:
        """Remove a product, returning the deleted record or None."""
