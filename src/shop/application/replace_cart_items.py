"""Application service: Replace Cart Items use case.

Everything is checked before anything is written, so a rejected payload
leaves the stored cart untouched.
"""

from __future__ import annotations

from typing import Any

from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.cart import Cart, CartLineItem
from shop.domain.model.value_objects import EntityId, Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.utils.logging import get_logger

logger = get_logger(__name__)


def parse_line_items(raw: Any) -> list[CartLineItem]:
    """Parse ``[{"product": id, "quantity": n}, ...]`` into line items."""
    if not isinstance(raw, list):
        raise ValidationError('Expected a "products" array')

    items: list[CartLineItem] = []
    seen: set[EntityId] = set()
    for entry in raw:
        if not isinstance(entry, dict) or not entry.get("product"):
            raise ValidationError('Each item requires "product"')
        try:
            quantity = Quantity.of(entry.get("quantity"))
        except ValidationError:
            raise ValidationError('Each item requires "quantity" >= 1') from None

        product_id = EntityId.of(entry["product"])
        if product_id in seen:
            raise ValidationError(f"Product '{product_id}' appears more than once")
        seen.add(product_id)
        items.append(CartLineItem(product_id=product_id, quantity=quantity))
    return items


class ReplaceCartItemsHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, cart_id: object, raw_items: Any) -> Cart:
        """Replace a cart's whole line-item list.

        Steps:
        1. Validate the payload shape (array, product + quantity >= 1 each).
        2. Load the cart.
        3. Check every referenced product exists, in one batched lookup.
        4. Swap the items in memory and persist once.
        """
        items = parse_line_items(raw_items)

        cart = self._cart_repo.get_by_id(EntityId.of(cart_id))
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        requested = [item.product_id for item in items]
        if requested:
            found = self._product_repo.get_many(requested)
            if len(found) != len(requested):
                raise EntityNotFoundError("One or more products do not exist")

        cart.replace_items(items)
        self._cart_repo.save(cart)

        logger.info(f"Cart {cart.id} items replaced ({len(items)} line items)")
        return cart
