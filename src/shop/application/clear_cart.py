"""Application service: Clear Cart use case."""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.cart_repository import CartRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: object) -> Cart:
        cart = self._cart_repo.get_by_id(EntityId.of(cart_id))
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.clear()
        self._cart_repo.save(cart)

        logger.info(f"Cart {cart.id} cleared")
        return cart
