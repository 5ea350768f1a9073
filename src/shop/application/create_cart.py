"""Application service: Create Cart use case."""

from __future__ import annotations

from shop.domain.model.cart import Cart
from shop.domain.repository.cart_repository import CartRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class CreateCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> Cart:
        cart = self._cart_repo.add(Cart(id=None))
        logger.info(f"Cart {cart.id} created")
        return cart
