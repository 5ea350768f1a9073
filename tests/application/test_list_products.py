"""Tests for catalog querying and pagination."""

import pytest

from shop.application.list_products import ListProductsHandler, ProductQuery, parse_filter
from shop.domain.model.product import PriceSort, ProductCriteria
from tests.fakes import FakeProductRepository, make_product


def _catalog(n: int = 25) -> FakeProductRepository:
    return FakeProductRepository([
        make_product(f"P-{i}", price=float(i), category="even" if i % 2 == 0 else "odd")
        for i in range(1, n + 1)
    ])


class TestParseFilter:

    def test_empty(self):
        assert parse_filter("  ") == ProductCriteria()

    def test_category_prefix(self):
        assert parse_filter("category:books") == ProductCriteria(category="books")

    def test_status_prefix(self):
        assert parse_filter("status:true") == ProductCriteria(status=True)
        assert parse_filter("status:false") == ProductCriteria(status=False)

    def test_available(self):
        assert parse_filter("available") == ProductCriteria(status=True, in_stock=True)

    def test_bare_value_is_category(self):
        assert parse_filter("toys") == ProductCriteria(category="toys")


class TestProductQueryParse:

    def test_defaults(self):
        q = ProductQuery.parse()
        assert (q.limit, q.page, q.sort) == (10, 1, None)

    @pytest.mark.parametrize("raw, expected", [("abc", 10), ("0", 10), ("-3", 1), ("5", 5)])
    def test_limit_coercion(self, raw, expected):
        assert ProductQuery.parse(limit=raw).limit == expected

    def test_sort(self):
        assert ProductQuery.parse(sort="DESC").sort is PriceSort.DESC
        assert ProductQuery.parse(sort="sideways").sort is None

    def test_explicit_parameters_win(self):
        q = ProductQuery.parse(query="category:books", category="toys", status="false")
        assert q.criteria == ProductCriteria(category="toys", status=False)


class TestListProducts:

    def test_pagination_of_25_items(self):
        handler = ListProductsHandler(_catalog(25))

        pages = [handler.handle(ProductQuery(page=p, limit=10)) for p in (1, 2, 3)]

        assert [len(p.items) for p in pages] == [10, 10, 5]
        assert all(p.total_pages == 3 for p in pages)
        assert [p.has_next_page for p in pages] == [True, True, False]
        assert [p.has_prev_page for p in pages] == [False, True, True]
        assert pages[0].next_page == 2
        assert pages[2].prev_page == 2

    def test_empty_catalog_has_one_page(self):
        page = ListProductsHandler(FakeProductRepository()).handle()
        assert page.total_pages == 1
        assert page.items == []
        assert not page.has_next_page

    def test_sort_by_price_desc(self):
        page = ListProductsHandler(_catalog(5)).handle(ProductQuery(sort=PriceSort.DESC))
        assert [p.price for p in page.items] == [5.0, 4.0, 3.0, 2.0, 1.0]

    def test_filter_counts_only_matches(self):
        page = ListProductsHandler(_catalog(25)).handle(
            ProductQuery(criteria=ProductCriteria(category="even"), limit=5)
        )
        assert page.total == 12
        assert page.total_pages == 3
        assert all(p.category == "even" for p in page.items)
