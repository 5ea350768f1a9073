"""Response schemas for the HTTP API and the realtime channel."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from shop.application.dto import CartLineView, CartView
from shop.domain.model.cart import Cart
from shop.domain.model.product import Product


class ProductOut(BaseModel):
    """Product as returned to clients."""

    id: str
    title: str
    description: str
    code: str
    price: Union[int, float]
    status: bool
    stock: Union[int, float]
    category: str
    thumbnails: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    @staticmethod
    def from_domain(product: Product) -> ProductOut:
        return ProductOut(
            id=str(product.id),
            title=product.title,
            description=product.description,
            code=product.code,
            price=product.price,
            status=product.status,
            stock=product.stock,
            category=product.category,
            thumbnails=list(product.thumbnails),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class CartItemOut(BaseModel):
    product: str
    quantity: int


class CartOut(BaseModel):
    id: str
    products: List[CartItemOut]

    @staticmethod
    def from_domain(cart: Cart) -> CartOut:
        return CartOut(
            id=str(cart.id),
            products=[
                CartItemOut(product=str(item.product_id), quantity=item.quantity.value)
                for item in cart.items
            ],
        )


def product_json(product: Product) -> dict:
    return ProductOut.from_domain(product).model_dump(mode="json", by_alias=True, exclude_none=True)


def products_json(products: list[Product]) -> list[dict]:
    return [product_json(p) for p in products]


def cart_json(cart: Cart) -> dict:
    return CartOut.from_domain(cart).model_dump(mode="json")


def cart_items_json(view: CartView, resolved: bool) -> list[dict]:
    def one(line: CartLineView) -> dict:
        if not resolved:
            return CartItemOut(product=str(line.product_id), quantity=line.quantity).model_dump()
        # A deleted product resolves to null, like an unmatched join.
        product = product_json(line.product) if line.product is not None else None
        return {"product": product, "quantity": line.quantity}

    return [one(line) for line in view.items]


def success(payload: Any, **extra: Any) -> dict:
    return {"status": "success", "payload": payload, **extra}


def failure(message: str, **extra: Any) -> dict:
    return {"status": "error", "message": message, **extra}
