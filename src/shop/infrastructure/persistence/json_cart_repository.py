"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from pathlib import Path

from shop.domain.model.cart import Cart, CartLineItem
from shop.domain.model.value_objects import EntityId, Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.infrastructure.persistence.json_store import (
    ensure_collection,
    next_id,
    numeric_id,
    read_collection,
    write_collection,
)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_collection(self._file_path)

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_id: EntityId) -> Cart | None:
        records = self._load_raw()
        index = self._index_of(records, cart_id)
        return None if index is None else self._to_domain(records[index])

    def add(self, cart: Cart) -> Cart:
        records = self._load_raw()
        cart.id = EntityId.of(next_id(records))
        records.append(self._to_raw(cart))
        self._persist_raw(records)
        return cart

    def save(self, cart: Cart) -> None:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        index = self._index_of(records, cart.id)  # type: ignore[arg-type]
        if index is None:
            records.append(self._to_raw(cart))
        else:
            records[index] = self._to_raw(cart)
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": cart.id.as_int() if cart.id is not None else None,
            "products": [
                {
                    "product": _stored_ref(item.product_id),
                    "quantity": item.quantity.value,
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            id=EntityId.of(raw["id"]),
            items=[
                CartLineItem(
                    product_id=EntityId.of(i["product"]),
                    quantity=Quantity(int(i["quantity"])),
                )
                for i in raw.get("products") or []
            ],
        )

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _index_of(records: list, cart_id: EntityId) -> int | None:
        wanted = cart_id.as_int()
        if wanted is None:
            return None
        for i, raw in enumerate(records):
            if isinstance(raw, dict) and numeric_id(raw.get("id")) == wanted:
                return i
        return None

    def _load_raw(self) -> list:
        # Unusable entries stay on disk untouched; lookups skip them.
        return read_collection(self._file_path)

    def _persist_raw(self, records: list) -> None:
        write_collection(self._file_path, records)


def _stored_ref(product_id: EntityId) -> int | str:
    """Product references are stored as numbers when they are numeric."""
    number = product_id.as_int()
    return number if number is not None else str(product_id)
