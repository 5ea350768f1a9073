"""Application service: Show Cart use case (query).

Optionally joins each line item with its product record. A line item
whose product has been deleted is still listed, with no product attached.
"""

from __future__ import annotations

from shop.application.dto import CartLineView, CartView
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, cart_id: object, resolve_products: bool = True) -> CartView | None:
        cart = self._cart_repo.get_by_id(EntityId.of(cart_id))
        if cart is None:
            return None

        products = {}
        if resolve_products and cart.items:
            products = {p.id: p for p in self._product_repo.get_many(cart.product_ids)}

        return CartView(
            id=cart.id,  # type: ignore[arg-type]
            items=[
                CartLineView(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    product=products.get(item.product_id),
                )
                for item in cart.items
            ],
        )
