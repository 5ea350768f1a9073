"""HTTP routes for shopping carts: /api/carts."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from shop.application.add_cart_item import AddCartItemHandler
from shop.application.clear_cart import ClearCartHandler
from shop.application.create_cart import CreateCartHandler
from shop.application.remove_cart_item import RemoveCartItemHandler
from shop.application.replace_cart_items import ReplaceCartItemsHandler
from shop.application.set_cart_item_quantity import SetCartItemQuantityHandler
from shop.application.show_cart import ShowCartHandler
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.web.dependencies import get_cart_repo, get_product_repo
from shop.infrastructure.web.schemas import cart_items_json, cart_json, success

router = APIRouter(prefix="/api/carts", tags=["carts"])


def _field(body: Any, name: str) -> Any:
    return body.get(name) if isinstance(body, dict) else None


@router.post("", status_code=201)
def create_cart(carts: CartRepository = Depends(get_cart_repo)):
    return success(cart_json(CreateCartHandler(carts).handle()))


@router.get("/{cid}")
def get_cart(
    cid: str,
    resolve: bool = True,
    carts: CartRepository = Depends(get_cart_repo),
    products: ProductRepository = Depends(get_product_repo),
):
    view = ShowCartHandler(carts, products).handle(cid, resolve_products=resolve)
    if view is None:
        raise EntityNotFoundError("Cart not found")
    return success(cart_items_json(view, resolved=resolve))


@router.post("/{cid}/product/{pid}", status_code=201)
def add_product_to_cart(
    cid: str,
    pid: str,
    carts: CartRepository = Depends(get_cart_repo),
    products: ProductRepository = Depends(get_product_repo),
):
    cart = AddCartItemHandler(carts, products).handle(cid, pid)
    return success(cart_json(cart))


@router.delete("/{cid}/products/{pid}")
def remove_product_from_cart(
    cid: str,
    pid: str,
    carts: CartRepository = Depends(get_cart_repo),
):
    return success(cart_json(RemoveCartItemHandler(carts).handle(cid, pid)))


@router.put("/{cid}")
def replace_cart_products(
    cid: str,
    body: Any = Body(None),
    carts: CartRepository = Depends(get_cart_repo),
    products: ProductRepository = Depends(get_product_repo),
):
    cart = ReplaceCartItemsHandler(carts, products).handle(cid, _field(body, "products"))
    return success(cart_json(cart))


@router.put("/{cid}/products/{pid}")
def set_product_quantity(
    cid: str,
    pid: str,
    body: Any = Body(None),
    carts: CartRepository = Depends(get_cart_repo),
):
    cart = SetCartItemQuantityHandler(carts).handle(cid, pid, _field(body, "quantity"))
    return success(cart_json(cart))


@router.delete("/{cid}")
def clear_cart(cid: str, carts: CartRepository = Depends(get_cart_repo)):
    return success(cart_json(ClearCartHandler(carts).handle(cid)))
