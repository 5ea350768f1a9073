"""FastAPI dependencies: hand each endpoint what ``create_app`` was given."""

from __future__ import annotations

from fastapi import Request

from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.web.realtime import ProductBroadcaster


def get_product_repo(request: Request) -> ProductRepository:
    return request.app.state.products


def get_cart_repo(request: Request) -> CartRepository:
    return request.app.state.carts


def get_broadcaster(request: Request) -> ProductBroadcaster:
    return request.app.state.broadcaster
