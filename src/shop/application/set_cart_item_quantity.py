"""Application service: Set Cart Item Quantity use case."""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import EntityId, Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class SetCartItemQuantityHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: object, product_id: object, quantity: object) -> Cart:
        """Overwrite the quantity of one line item (must be a number >= 1)."""
        try:
            qty = Quantity.of(quantity)
        except ValidationError:
            raise ValidationError("Invalid quantity (must be a number >= 1)") from None

        cart = self._cart_repo.get_by_id(EntityId.of(cart_id))
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.set_quantity(EntityId.of(product_id), qty)
        self._cart_repo.save(cart)

        logger.info(f"Cart {cart.id}: product {product_id} quantity set to {qty}")
        return cart
