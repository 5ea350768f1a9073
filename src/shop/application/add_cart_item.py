"""Application service: Add Cart Item use case.

This is the one place where a cart reaches into the product catalog:
a product must exist before it can be put in a cart.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class AddCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, cart_id: object, product_id: object) -> Cart:
        """Add one unit of a product; an existing line item is incremented."""
        cart = self._cart_repo.get_by_id(EntityId.of(cart_id))
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        product = self._product_repo.get_by_id(EntityId.of(product_id))
        if product is None:
            raise EntityNotFoundError("Product not found (cannot add to cart)")

        cart.add_product(product.id)  # type: ignore[arg-type]
        self._cart_repo.save(cart)

        logger.info(
            f"Product {product.id} added to cart {cart.id}, "
            f"quantity now {cart.quantity_of(product.id)}"  # type: ignore[arg-type]
        )
        return cart
