"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from shop.domain.exceptions import ValidationError


@dataclass(frozen=True, eq=False)
class EntityId:
    """Opaque identifier for products and carts.

    The file-backed store hands out small integers, the document store
    hands out ObjectId hex strings. Both travel through the domain as
    their string form; only the file-backed allocator ever looks at the
    numeric value.

    Ids made only of digits compare by number, so ``"01"`` and ``"1"``
    name the same record.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(f"Invalid id: {self.value!r}")

    def as_int(self) -> int | None:
        """Numeric view of the id, or None when it is not a finite number."""
        try:
            number = float(self.value)
        except ValueError:
            return None
        if not math.isfinite(number) or not number.is_integer():
            return None
        return int(number)

    @property
    def _key(self) -> object:
        if self.value.isascii() and self.value.isdecimal():
            return int(self.value)
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityId):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.value

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: object) -> EntityId:
        """Build an id from whatever the caller holds (int, str, ObjectId)."""
        if isinstance(raw, EntityId):
            return raw
        if raw is None or isinstance(raw, bool):
            raise ValidationError(f"Invalid id: {raw!r}")
        return EntityId(str(raw).strip())


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart never holds zero or negative units
    of a product.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: int) -> Quantity:
        return Quantity(self.value + other)

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: object) -> Quantity:
        """Coerce a client-supplied quantity (int, whole float or numeric string)."""
        if isinstance(raw, bool) or raw is None:
            raise ValidationError(f"Invalid quantity: {raw!r}")
        try:
            number = float(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid quantity: {raw!r}") from exc
        if not math.isfinite(number) or not number.is_integer():
            raise ValidationError(f"Invalid quantity: {raw!r}")
        return Quantity(int(number))
