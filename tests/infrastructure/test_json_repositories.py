"""Tests for the JSON-file-backed repositories."""

import json

import pytest

from shop.domain.model.cart import Cart
from shop.domain.model.product import PriceSort, ProductCriteria
from shop.domain.model.value_objects import EntityId
from shop.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shop.infrastructure.persistence.json_product_repository import JsonProductRepository
from tests.fakes import make_product


@pytest.fixture
def products(tmp_path) -> JsonProductRepository:
    return JsonProductRepository(tmp_path / "products.json")


@pytest.fixture
def carts(tmp_path) -> JsonCartRepository:
    return JsonCartRepository(tmp_path / "carts.json")


class TestJsonProductRepository:

    def test_ids_are_sequential_integers_on_disk(self, products, tmp_path):
        products.add(make_product("A"))
        products.add(make_product("B"))

        stored = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
        assert [r["id"] for r in stored] == [1, 2]

    def test_get_by_id_accepts_numeric_forms(self, products):
        products.add(make_product("A"))
        assert products.get_by_id(EntityId("1")).code == "A"
        assert products.get_by_id(EntityId("1.0")).code == "A"
        assert products.get_by_id(EntityId("abc")) is None

    def test_ids_are_not_reused_after_delete_of_earlier(self, products):
        products.add(make_product("A"))
        products.add(make_product("B"))
        products.delete(EntityId("1"))
        third = products.add(make_product("C"))
        assert third.id == EntityId("3")

    def test_get_by_code_and_get_many(self, products):
        for code in ("A", "B", "C"):
            products.add(make_product(code))
        assert products.get_by_code("B").id == EntityId("2")
        assert products.get_by_code("Z") is None
        found = products.get_many([EntityId("1"), EntityId("3"), EntityId("9")])
        assert sorted(p.code for p in found) == ["A", "C"]

    def test_save_overwrites(self, products):
        product = products.add(make_product("A"))
        product.title = "Changed"
        products.save(product)
        assert products.get_by_id(product.id).title == "Changed"
        assert len(products.list_all()) == 1

    def test_delete_returns_removed_record(self, products):
        products.add(make_product("A"))
        assert products.delete(EntityId("1")).code == "A"
        assert products.delete(EntityId("1")) is None
        assert products.list_all() == []

    def test_find_sorts_and_slices(self, products):
        for i, price in enumerate([30.0, 10.0, 20.0]):
            products.add(make_product(f"P{i}", price=price))

        asc = products.find(ProductCriteria(), PriceSort.ASC, offset=0, limit=2)
        assert [p.price for p in asc] == [10.0, 20.0]
        unsorted = products.find(ProductCriteria(), None, offset=1, limit=5)
        assert [p.code for p in unsorted] == ["P1", "P2"]

    def test_count_with_criteria(self, products):
        products.add(make_product("A", stock=0))
        products.add(make_product("B"))
        products.add(make_product("C", status=False))
        assert products.count(ProductCriteria()) == 3
        assert products.count(ProductCriteria(status=True, in_stock=True)) == 1

    def test_records_without_valid_id_are_ignored_but_kept(self, products, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"id": "junk", "code": "X"}, "noise"]), encoding="utf-8")

        assert products.list_all() == []
        created = products.add(make_product("A"))
        assert created.id == EntityId("1")
        stored = json.loads(path.read_text(encoding="utf-8"))
        assert {"id": "junk", "code": "X"} in stored
        assert "noise" in stored


class TestJsonCartRepository:

    def test_add_and_reload(self, carts):
        cart = carts.add(Cart(id=None))
        assert cart.id == EntityId("1")
        assert carts.get_by_id(EntityId("1")).items == []

    def test_line_items_persist(self, carts, tmp_path):
        cart = carts.add(Cart(id=None))
        cart.add_product(EntityId("5"))
        cart.add_product(EntityId("5"))
        carts.save(cart)

        stored = json.loads((tmp_path / "carts.json").read_text(encoding="utf-8"))
        assert stored == [{"id": 1, "products": [{"product": 5, "quantity": 2}]}]
        assert carts.get_by_id(cart.id).quantity_of(EntityId("5")) == 2

    def test_missing_cart(self, carts):
        assert carts.get_by_id(EntityId("3")) is None

    def test_unusable_entries_survive_writes(self, carts, tmp_path):
        path = tmp_path / "carts.json"
        path.write_text(json.dumps([7, {"id": 4, "products": []}, None]), encoding="utf-8")

        cart = carts.add(Cart(id=None))
        assert cart.id == EntityId("5")
        cart.add_product(EntityId("1"))
        carts.save(cart)

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert stored[0] == 7
        assert stored[2] is None
        assert carts.get_by_id(EntityId("05")).quantity_of(EntityId("1")) == 1
