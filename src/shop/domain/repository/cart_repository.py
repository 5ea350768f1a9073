"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import EntityId


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: EntityId) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def add(self, cart: Cart) -> Cart:
        """Persist a new cart and return it with its assigned id."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the full state of an existing cart."""
