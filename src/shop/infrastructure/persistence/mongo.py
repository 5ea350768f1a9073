"""MongoDB plumbing shared by the document-store repositories.

Each collection mirrors one aggregate:

- Product -> "products" (unique index on ``code``)
- Cart    -> "carts"
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List

from bson.objectid import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from shop.domain.exceptions import ConflictError, StorageError, ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import EntityId
from shop.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = "products"
CARTS = "carts"
DEFAULT_DATABASE = "tienda"


class ProductDocument(BaseModel):
    """Products collection schema"""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, description="Product title")
    description: str = Field(..., min_length=1, description="Product description")
    code: str = Field(..., min_length=1, description="Unique product code")
    price: float = Field(..., ge=0, description="Unit price")
    status: bool = Field(True, description="Whether the product is active")
    stock: float = Field(..., ge=0, description="Units in stock")
    category: str = Field(..., min_length=1, description="Product category")
    thumbnails: List[str] = Field(default_factory=list, description="Image paths or URLs")

    @staticmethod
    def from_domain(product: Product) -> dict:
        """Validated document body for *product*, without ``_id`` or timestamps."""
        try:
            document = ProductDocument(
                title=product.title,
                description=product.description,
                code=product.code,
                price=product.price,
                status=product.status,
                stock=product.stock,
                category=product.category,
                thumbnails=list(product.thumbnails),
            )
        except SchemaError as exc:
            fields = tuple(str(err["loc"][0]) for err in exc.errors())
            raise ValidationError(
                f"Invalid or missing fields: {', '.join(fields)}", fields=fields
            ) from exc
        return document.model_dump()


def connect(uri: str, database: str | None = None) -> tuple[MongoClient, Database]:
    """Open a client; an explicit *database* wins over the one named in *uri*."""
    client: MongoClient = MongoClient(uri)
    if database:
        db = client[database]
    else:
        db = client.get_default_database(default=DEFAULT_DATABASE)
    logger.info(f"MongoDB connected (database '{db.name}')")
    return client, db


def ensure_indexes(db: Database) -> None:
    with driver_errors():
        db[PRODUCTS].create_index([("code", ASCENDING)], unique=True)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_object_id(entity_id: EntityId) -> ObjectId | None:
    """ObjectId for *entity_id*, or None when it cannot be one."""
    value = str(entity_id)
    return ObjectId(value) if ObjectId.is_valid(value) else None


def to_reference(entity_id: EntityId) -> ObjectId | str:
    """How a foreign key is stored: as an ObjectId when it looks like one."""
    oid = to_object_id(entity_id)
    return oid if oid is not None else str(entity_id)


@contextmanager
def driver_errors(conflict_message: str = "Duplicate key") -> Iterator[None]:
    """Translate driver exceptions into domain exceptions."""
    try:
        yield
    except DuplicateKeyError as exc:
        raise ConflictError(conflict_message) from exc
    except PyMongoError as exc:
        raise StorageError(f"Database error: {exc}") from exc
