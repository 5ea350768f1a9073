"""MongoDB-backed implementation of ProductRepository.

Ids are minted by the store (ObjectId) and the unique index on ``code``
backs up the application-level uniqueness check.
"""

from __future__ import annotations

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.database import Database

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.product import PriceSort, Product, ProductCriteria
from shop.domain.model.value_objects import EntityId
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.persistence.mongo import (
    PRODUCTS,
    ProductDocument,
    driver_errors,
    to_object_id,
    utcnow,
)


class MongoProductRepository(ProductRepository):

    def __init__(self, db: Database) -> None:
        self._collection = db[PRODUCTS]

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: EntityId) -> Product | None:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        with driver_errors():
            doc = self._collection.find_one({"_id": oid})
        return self._to_domain(doc) if doc else None

    def get_by_code(self, code: str) -> Product | None:
        with driver_errors():
            doc = self._collection.find_one({"code": code})
        return self._to_domain(doc) if doc else None

    def get_many(self, product_ids: list[EntityId]) -> list[Product]:
        oids = [oid for oid in map(to_object_id, product_ids) if oid is not None]
        if not oids:
            return []
        with driver_errors():
            docs = list(self._collection.find({"_id": {"$in": oids}}))
        return [self._to_domain(doc) for doc in docs]

    def list_all(self) -> list[Product]:
        with driver_errors():
            docs = list(self._collection.find())
        return [self._to_domain(doc) for doc in docs]

    def find(
        self,
        criteria: ProductCriteria,
        sort: PriceSort | None,
        offset: int,
        limit: int,
    ) -> list[Product]:
        with driver_errors():
            cursor = self._collection.find(self._to_filter(criteria))
            if sort is not None:
                cursor = cursor.sort("price", ASCENDING if sort is PriceSort.ASC else DESCENDING)
            docs = list(cursor.skip(offset).limit(limit))
        return [self._to_domain(doc) for doc in docs]

    def count(self, criteria: ProductCriteria) -> int:
        with driver_errors():
            return self._collection.count_documents(self._to_filter(criteria))

    def add(self, product: Product) -> Product:
        doc = ProductDocument.from_domain(product)
        now = utcnow()
        doc["createdAt"] = now
        doc["updatedAt"] = now
        with driver_errors(f'Product code "{product.code}" already exists'):
            result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._to_domain(doc)

    def save(self, product: Product) -> Product:
        oid = to_object_id(product.id) if product.id is not None else None
        if oid is None:
            raise EntityNotFoundError("Product not found")

        changes = ProductDocument.from_domain(product)
        changes["updatedAt"] = utcnow()
        with driver_errors(f'Product code "{product.code}" already exists'):
            doc = self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise EntityNotFoundError("Product not found")
        return self._to_domain(doc)

    def delete(self, product_id: EntityId) -> Product | None:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        with driver_errors():
            doc = self._collection.find_one_and_delete({"_id": oid})
        return self._to_domain(doc) if doc else None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_filter(criteria: ProductCriteria) -> dict:
        query: dict = {}
        if criteria.category is not None:
            query["category"] = criteria.category
        if criteria.status is not None:
            query["status"] = criteria.status
        if criteria.in_stock:
            query["stock"] = {"$gt": 0}
        return query

    @staticmethod
    def _to_domain(doc: dict) -> Product:
        return Product(
            id=EntityId.of(doc["_id"]),
            title=doc["title"],
            description=doc["description"],
            code=doc["code"],
            price=doc["price"],
            status=doc.get("status", True),
            stock=doc["stock"],
            category=doc["category"],
            thumbnails=list(doc.get("thumbnails") or []),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )
