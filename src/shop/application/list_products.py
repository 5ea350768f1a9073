"""Application service: List Products use case (query).

Turns raw catalog parameters (``limit``, ``page``, ``sort``, free-text
``query`` plus explicit ``category``/``status``) into a bounded page.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from shop.application.dto import ProductPage
from shop.domain.model.product import PriceSort, Product, ProductCriteria
from shop.domain.repository.product_repository import ProductRepository

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


def _positive_int(raw: object, default: int) -> int:
    """Coerce a query-string number; missing, zero or junk means *default*."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        number = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or int(number) == 0:
        return default
    return max(1, int(number))


def parse_filter(query: str | None) -> ProductCriteria:
    """Parse the free-text ``query`` parameter.

    ``category:<v>`` and ``status:<v>`` select on one field, the literal
    ``available`` means active and in stock, anything else is a category.
    """
    q = (query or "").strip()
    if not q:
        return ProductCriteria()
    if q.startswith("category:"):
        return ProductCriteria(category=q.split(":")[1])
    if q.startswith("status:"):
        return ProductCriteria(status=q.split(":")[1] == "true")
    if q == "available":
        return ProductCriteria(status=True, in_stock=True)
    return ProductCriteria(category=q)


@dataclass(frozen=True)
class ProductQuery:
    criteria: ProductCriteria = ProductCriteria()
    sort: PriceSort | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @staticmethod
    def parse(
        limit: object = None,
        page: object = None,
        sort: str | None = None,
        query: str | None = None,
        category: str | None = None,
        status: str | None = None,
    ) -> ProductQuery:
        """Build a query from raw request parameters.

        Explicit ``category``/``status`` win over whatever ``query`` said.
        """
        criteria = parse_filter(query)
        if category is not None and category.strip():
            criteria = replace(criteria, category=category.strip())
        if status is not None:
            criteria = replace(criteria, status=str(status) == "true")

        sort_key = (sort or "").lower()
        return ProductQuery(
            criteria=criteria,
            sort=PriceSort(sort_key) if sort_key in ("asc", "desc") else None,
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
        )


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: ProductQuery | None = None) -> ProductPage:
        query = query or ProductQuery()
        total = self._product_repo.count(query.criteria)
        items = self._product_repo.find(
            query.criteria,
            query.sort,
            offset=(query.page - 1) * query.limit,
            limit=query.limit,
        )
        return ProductPage(
            items=items,
            total=total,
            page=query.page,
            limit=query.limit,
            total_pages=max(1, math.ceil(total / query.limit)),
        )

    def all(self) -> list[Product]:
        """Every product, unpaginated (used for the realtime product list)."""
        return self._product_repo.list_all()
