"""MongoDB-backed implementation of CartRepository.

A cart is one document; its line items are embedded and rewritten as a
whole on every save.
"""

from __future__ import annotations

from pymongo.database import Database

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart, CartLineItem
from shop.domain.model.value_objects import EntityId, Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.infrastructure.persistence.mongo import (
    CARTS,
    driver_errors,
    to_object_id,
    to_reference,
    utcnow,
)


class MongoCartRepository(CartRepository):

    def __init__(self, db: Database) -> None:
        self._collection = db[CARTS]

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_id: EntityId) -> Cart | None:
        oid = to_object_id(cart_id)
        if oid is None:
            return None
        with driver_errors():
            doc = self._collection.find_one({"_id": oid})
        return self._to_domain(doc) if doc else None

    def add(self, cart: Cart) -> Cart:
        now = utcnow()
        doc = {"products": self._items_to_raw(cart), "createdAt": now, "updatedAt": now}
        with driver_errors():
            result = self._collection.insert_one(doc)
        cart.id = EntityId.of(result.inserted_id)
        return cart

    def save(self, cart: Cart) -> None:
        oid = to_object_id(cart.id) if cart.id is not None else None
        if oid is None:
            raise EntityNotFoundError("Cart not found")
        with driver_errors():
            result = self._collection.update_one(
                {"_id": oid},
                {"$set": {"products": self._items_to_raw(cart), "updatedAt": utcnow()}},
            )
        if result.matched_count == 0:
            raise EntityNotFoundError("Cart not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _items_to_raw(cart: Cart) -> list[dict]:
        return [
            {"product": to_reference(item.product_id), "quantity": item.quantity.value}
            for item in cart.items
        ]

    @staticmethod
    def _to_domain(doc: dict) -> Cart:
        return Cart(
            id=EntityId.of(doc["_id"]),
            items=[
                CartLineItem(
                    product_id=EntityId.of(i["product"]),
                    quantity=Quantity(int(i["quantity"])),
                )
                for i in doc.get("products") or []
            ],
        )
