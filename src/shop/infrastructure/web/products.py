"""HTTP routes for the product catalog: /api/products."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends, Request

from shop.application.add_product import AddProductHandler
from shop.application.delete_product import DeleteProductHandler
from shop.application.list_products import ListProductsHandler, ProductQuery
from shop.application.show_product import ShowProductHandler
from shop.application.update_product import UpdateProductHandler
from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.web.dependencies import get_broadcaster, get_product_repo
from shop.infrastructure.web.realtime import ProductBroadcaster
from shop.infrastructure.web.schemas import product_json, products_json, success

router = APIRouter(prefix="/api/products", tags=["products"])


def _page_link(request: Request, page: Optional[int]) -> Optional[str]:
    if page is None:
        return None
    return str(request.url.include_query_params(page=page))


@router.get("")
def list_products(
    request: Request,
    limit: Optional[str] = None,
    page: Optional[str] = None,
    sort: Optional[str] = None,
    query: Optional[str] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
    products: ProductRepository = Depends(get_product_repo),
):
    result = ListProductsHandler(products).handle(
        ProductQuery.parse(
            limit=limit,
            page=page,
            sort=sort,
            query=query,
            category=category,
            status=status,
        )
    )
    return success(
        products_json(result.items),
        totalPages=result.total_pages,
        prevPage=result.prev_page,
        nextPage=result.next_page,
        page=result.page,
        hasPrevPage=result.has_prev_page,
        hasNextPage=result.has_next_page,
        prevLink=_page_link(request, result.prev_page),
        nextLink=_page_link(request, result.next_page),
    )


@router.get("/{pid}")
def get_product(pid: str, products: ProductRepository = Depends(get_product_repo)):
    product = ShowProductHandler(products).handle(pid)
    if product is None:
        raise EntityNotFoundError("Product not found")
    return success(product_json(product))


@router.post("", status_code=201)
def create_product(
    background_tasks: BackgroundTasks,
    payload: Any = Body(None),
    products: ProductRepository = Depends(get_product_repo),
    broadcaster: ProductBroadcaster = Depends(get_broadcaster),
):
    created = AddProductHandler(products).handle(payload)
    background_tasks.add_task(broadcaster.publish_catalog, products)
    return success(product_json(created))


@router.put("/{pid}")
def update_product(
    pid: str,
    background_tasks: BackgroundTasks,
    changes: Any = Body(None),
    products: ProductRepository = Depends(get_product_repo),
    broadcaster: ProductBroadcaster = Depends(get_broadcaster),
):
    if not isinstance(changes, dict):
        raise ValidationError("Expected a JSON object with the fields to update")
    updated = UpdateProductHandler(products).handle(pid, changes)
    background_tasks.add_task(broadcaster.publish_catalog, products)
    return success(product_json(updated))


@router.delete("/{pid}")
def delete_product(
    pid: str,
    background_tasks: BackgroundTasks,
    products: ProductRepository = Depends(get_product_repo),
    broadcaster: ProductBroadcaster = Depends(get_broadcaster),
):
    deleted = DeleteProductHandler(products).handle(pid)
    background_tasks.add_task(broadcaster.publish_catalog, products)
    return success(product_json(deleted))
