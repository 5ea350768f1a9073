"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.cart_repository import CartRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class RemoveCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: object, product_id: object) -> Cart:
        """Drop a product's line item entirely.

        The product itself need not exist any more, only the line item.
        """
        cart = self._cart_repo.get_by_id(EntityId.of(cart_id))
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.remove_product(EntityId.of(product_id))
        self._cart_repo.save(cart)

        logger.info(f"Product {product_id} removed from cart {cart.id}")
        return cart
