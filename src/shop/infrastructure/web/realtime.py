"""Realtime product channel over a WebSocket.

Every connected client receives the full product list on connect and
again after any product mutation, whether it came over HTTP or over the
socket itself. Clients may create and delete products through the socket;
each request is acknowledged with an ``ack`` frame carrying its ``ref``.

Frames are JSON objects::

    server -> client  {"event": "products:list", "data": [...]}
    client -> server  {"event": "product:create", "data": {...}, "ref": 1}
    client -> server  {"event": "product:delete", "data": "<id>", "ref": 2}
    server -> client  {"event": "ack", "ref": 1, "ok": true, "data": {...}}
    server -> client  {"event": "ack", "ref": 2, "ok": false, "error": "..."}
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.concurrency import run_in_threadpool

from shop.application.add_product import AddProductHandler
from shop.application.delete_product import DeleteProductHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.web.schemas import product_json, products_json
from shop.utils.logging import get_logger

logger = get_logger(__name__)

LIST_EVENT = "products:list"


class ProductBroadcaster:
    """Keeps track of connected sockets and fans the product list out to them."""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._connections.add(websocket)
        logger.info(f"Realtime client connected ({len(self._connections)} open)")

    def disconnect(self, websocket: WebSocket) -> None:
        self._connections.discard(websocket)
        logger.info(f"Realtime client disconnected ({len(self._connections)} open)")

    async def broadcast(self, products: list[Product]) -> None:
        message = {"event": LIST_EVENT, "data": products_json(products)}
        for websocket in list(self._connections):
            try:
                await websocket.send_json(message)
            except (WebSocketDisconnect, RuntimeError):
                self.disconnect(websocket)

    async def publish_catalog(self, product_repo: ProductRepository) -> None:
        """Re-read the catalog and push it to every connected client."""
        if not self._connections:
            return
        products = await run_in_threadpool(product_repo.list_all)
        await self.broadcast(products)


router = APIRouter()


def _ack(ref: Any, ok: bool, **body: Any) -> dict:
    return {"event": "ack", "ref": ref, "ok": ok, **body}


@router.websocket("/ws/products")
async def products_channel(websocket: WebSocket) -> None:
    broadcaster: ProductBroadcaster = websocket.app.state.broadcaster
    product_repo: ProductRepository = websocket.app.state.products

    await broadcaster.connect(websocket)
    try:
        products = await run_in_threadpool(product_repo.list_all)
        await websocket.send_json({"event": LIST_EVENT, "data": products_json(products)})

        while True:
            text = await websocket.receive_text()
            try:
                message = json.loads(text)
            except ValueError:
                await websocket.send_json(_ack(None, False, error="Malformed message"))
                continue
            if not isinstance(message, dict):
                await websocket.send_json(_ack(None, False, error="Malformed message"))
                continue
            await _dispatch(websocket, broadcaster, product_repo, message)
    except WebSocketDisconnect:
        logger.debug("Realtime client went away")
    finally:
        broadcaster.disconnect(websocket)


async def _dispatch(
    websocket: WebSocket,
    broadcaster: ProductBroadcaster,
    product_repo: ProductRepository,
    message: dict,
) -> None:
    event = message.get("event")
    ref = message.get("ref")
    data = message.get("data")

    try:
        if event == "product:create":
            created = await run_in_threadpool(AddProductHandler(product_repo).handle, data)
            await broadcaster.publish_catalog(product_repo)
            await websocket.send_json(_ack(ref, True, data=product_json(created)))
        elif event == "product:delete":
            await run_in_threadpool(DeleteProductHandler(product_repo).handle, data)
            await broadcaster.publish_catalog(product_repo)
            await websocket.send_json(_ack(ref, True))
        else:
            await websocket.send_json(_ack(ref, False, error=f"Unknown event: {event}"))
    except DomainException as exc:
        await websocket.send_json(_ack(ref, False, error=str(exc)))
