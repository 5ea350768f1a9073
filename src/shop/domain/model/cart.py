"""Cart aggregate.

The Cart is an aggregate root that owns its line items. A line item only
references a product by id; deleting that product later leaves the line
item in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.value_objects import EntityId, Quantity


@dataclass
class CartLineItem:
    product_id: EntityId
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for shopping carts.

    Invariant: at most one line item per product id, every quantity >= 1.
    """

    id: EntityId | None
    items: list[CartLineItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product_id: EntityId) -> None:
        """Add one unit of a product, merging into an existing line item."""
        item = self._find_item(product_id)
        if item is None:
            self.items.append(CartLineItem(product_id, Quantity(1)))
        else:
            item.quantity = item.quantity + 1

    def remove_product(self, product_id: EntityId) -> None:
        item = self._find_item(product_id)
        if item is None:
            raise EntityNotFoundError("Product was not in the cart")
        self.items.remove(item)

    def set_quantity(self, product_id: EntityId, quantity: Quantity) -> None:
        item = self._find_item(product_id)
        if item is None:
            raise EntityNotFoundError("Product is not in the cart")
        item.quantity = quantity

    def replace_items(self, items: list[CartLineItem]) -> None:
        """Swap the whole line-item list in one go."""
        seen: set[EntityId] = set()
        for item in items:
            if item.product_id in seen:
                raise ValidationError(
                    f"Product '{item.product_id}' appears more than once"
                )
            seen.add(item.product_id)
        self.items = list(items)

    def clear(self) -> None:
        self.items = []

    # --- Queries --------------------------------------------------------------

    @property
    def product_ids(self) -> list[EntityId]:
        return [item.product_id for item in self.items]

    def quantity_of(self, product_id: EntityId) -> int:
        item = self._find_item(product_id)
        return item.quantity.value if item is not None else 0

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: EntityId) -> CartLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
