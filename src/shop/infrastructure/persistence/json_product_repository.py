"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from shop.domain.model.product import PriceSort, Product, ProductCriteria
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.persistence.json_store import (
    ensure_collection,
    next_id,
    numeric_id,
    read_collection,
    write_collection,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_collection(self._file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: EntityId) -> Product | None:
        records = self._load_raw()
        index = self._index_of(records, product_id)
        return None if index is None else self._to_domain(records[index])

    def get_by_code(self, code: str) -> Product | None:
        for raw in self._addressable():
            if raw.get("code") == code:
                return self._to_domain(raw)
        return None

    def get_many(self, product_ids: list[EntityId]) -> list[Product]:
        wanted = {pid.as_int() for pid in product_ids} - {None}
        return [
            self._to_domain(raw)
            for raw in self._addressable()
            if numeric_id(raw.get("id")) in wanted
        ]

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._addressable()]

    def find(
        self,
        criteria: ProductCriteria,
        sort: PriceSort | None,
        offset: int,
        limit: int,
    ) -> list[Product]:
        matching = [p for p in self.list_all() if criteria.matches(p)]
        if sort is not None:
            matching.sort(key=lambda p: p.price, reverse=sort is PriceSort.DESC)
        return matching[offset:offset + limit]

    def count(self, criteria: ProductCriteria) -> int:
        return sum(1 for p in self.list_all() if criteria.matches(p))

    def add(self, product: Product) -> Product:
        records = self._load_raw()
        product.id = EntityId.of(next_id(records))
        records.append(self._to_raw(product))
        self._persist_raw(records)
        return product

    def save(self, product: Product) -> Product:
        records = self._load_raw()
        index = self._index_of(records, product.id)  # type: ignore[arg-type]
        if index is None:
            records.append(self._to_raw(product))
        else:
            records[index] = self._to_raw(product)
        self._persist_raw(records)
        return product

    def delete(self, product_id: EntityId) -> Product | None:
        records = self._load_raw()
        index = self._index_of(records, product_id)
        if index is None:
            return None
        removed = records.pop(index)
        self._persist_raw(records)
        return self._to_domain(removed)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id.as_int() if product.id is not None else None,
            "title": product.title,
            "description": product.description,
            "code": product.code,
            "price": product.price,
            "status": product.status,
            "stock": product.stock,
            "category": product.category,
            "thumbnails": list(product.thumbnails),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=EntityId.of(raw["id"]),
            title=raw.get("title", ""),
            description=raw.get("description", ""),
            code=raw.get("code", ""),
            price=raw.get("price", 0),
            status=raw.get("status", True),
            stock=raw.get("stock", 0),
            category=raw.get("category", ""),
            thumbnails=list(raw.get("thumbnails") or []),
        )

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _index_of(records: list, product_id: EntityId) -> int | None:
        wanted = product_id.as_int()
        if wanted is None:
            return None
        for i, raw in enumerate(records):
            if isinstance(raw, dict) and numeric_id(raw.get("id")) == wanted:
                return i
        return None

    def _load_raw(self) -> list:
        # Unusable entries stay on disk untouched; lookups skip them.
        return read_collection(self._file_path)

    def _addressable(self) -> list[dict]:
        return [
            r for r in self._load_raw()
            if isinstance(r, dict) and numeric_id(r.get("id")) is not None
        ]

    def _persist_raw(self, records: list) -> None:
        write_collection(self._file_path, records)
