"""Product aggregate.

Products live independently of carts. They have their own lifecycle:
they are created from a validated payload, patched field by field and
deleted outright. Carts only hold their ids.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Mapping

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import EntityId


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------

def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_amount(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def _is_flag(value: Any) -> bool:
    return isinstance(value, bool)


def _is_text_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


FIELD_RULES: dict[str, Callable[[Any], bool]] = {
    "title": _is_text,
    "description": _is_text,
    "code": _is_text,
    "price": _is_amount,
    "status": _is_flag,
    "stock": _is_amount,
    "category": _is_text,
    "thumbnails": _is_text_list,
}

TEXT_FIELDS = ("title", "description", "code", "category")


def invalid_fields(payload: Mapping[str, Any], names: tuple[str, ...] | None = None) -> list[str]:
    """Return every field of *names* (default: all) that *payload* gets wrong.

    A field missing from the payload counts as wrong.
    """
    checked = names if names is not None else tuple(FIELD_RULES)
    return [
        name for name in checked
        if name not in payload or not FIELD_RULES[name](payload[name])
    ]


def _raise_invalid(fields: list[str]) -> None:
    raise ValidationError(
        f"Invalid or missing fields: {', '.join(fields)}", fields=tuple(fields)
    )


def _normalize(name: str, value: Any) -> Any:
    if name in TEXT_FIELDS:
        return value.strip()
    if name == "thumbnails":
        return list(value)
    return value


# ---------------------------------------------------------------------------
# Draft (validated input for a new product)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProductDraft:
    """A fully validated product that has not been persisted yet."""

    title: str
    description: str
    code: str
    price: float
    status: bool
    stock: float
    category: str
    thumbnails: list[str] = field(default_factory=list)

    @staticmethod
    def from_payload(payload: Any) -> ProductDraft:
        """Validate a raw payload in a single pass.

        Any client-supplied ``id`` is ignored. Raises ValidationError naming
        every offending field, not just the first one.
        """
        if not isinstance(payload, Mapping):
            payload = {}
        errors = invalid_fields(payload)
        if errors:
            _raise_invalid(errors)
        return ProductDraft(**{name: _normalize(name, payload[name]) for name in FIELD_RULES})


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------

@dataclass
class Product:
    """A product in the catalog.

    ``created_at``/``updated_at`` are only filled in by stores that manage
    timestamps themselves.
    """

    id: EntityId | None
    title: str
    description: str
    code: str
    price: float
    status: bool
    stock: float
    category: str
    thumbnails: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def from_draft(draft: ProductDraft) -> Product:
        return Product(
            id=None,
            title=draft.title,
            description=draft.description,
            code=draft.code,
            price=draft.price,
            status=draft.status,
            stock=draft.stock,
            category=draft.category,
            thumbnails=list(draft.thumbnails),
        )

    def with_changes(self, changes: Mapping[str, Any]) -> Product:
        """Shallow-merge *changes* over this product.

        Only known fields are applied; ``id`` and anything unknown are
        dropped. Every supplied known field must pass the same rule as on
        creation.
        """
        known = {name: value for name, value in changes.items() if name in FIELD_RULES}
        errors = invalid_fields(known, tuple(known))
        if errors:
            _raise_invalid(errors)
        return replace(self, **{name: _normalize(name, value) for name, value in known.items()})

    @property
    def is_available(self) -> bool:
        return self.status and self.stock > 0


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class PriceSort(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ProductCriteria:
    """Filter for a catalog query. ``None`` means "don't care"."""

    category: str | None = None
    status: bool | None = None
    in_stock: bool = False

    def matches(self, product: Product) -> bool:
        if self.category is not None and product.category != self.category:
            return False
        if self.status is not None and product.status != self.status:
            return False
        if self.in_stock and not product.stock > 0:
            return False
        return True
