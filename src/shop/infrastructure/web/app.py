"""FastAPI application factory.

The app owns no state of its own: repositories (and optionally the
broadcaster) are handed in by the caller and exposed to endpoints through
``app.state``.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import FastAPI

from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.web import carts, products, realtime
from shop.infrastructure.web.errors import register_error_handlers
from shop.infrastructure.web.realtime import ProductBroadcaster


def create_app(
    products_repo: ProductRepository,
    carts_repo: CartRepository,
    broadcaster: ProductBroadcaster | None = None,
) -> FastAPI:
    app = FastAPI(title="Shop API", version="1.0.0")

    app.state.products = products_repo
    app.state.carts = carts_repo
    app.state.broadcaster = broadcaster or ProductBroadcaster()

    register_error_handlers(app)

    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(realtime.router)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "ts": datetime.now(timezone.utc).isoformat()}

    return app
