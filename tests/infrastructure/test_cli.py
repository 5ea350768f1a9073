"""End-to-end CLI tests against JSON storage in a temporary directory."""

import pytest
from click.testing import CliRunner

from shop.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("SHOP_STORAGE", "file")
    monkeypatch.setenv("SHOP_DATA_DIR", str(tmp_path))
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(cli, list(args))

    return invoke


def _add_widget(run, code="W-1"):
    return run(
        "product", "add",
        "--title", "Widget",
        "--description", "A useful widget",
        "--code", code,
        "--price", "15",
        "--stock", "10",
        "--category", "tools",
    )


class TestProductCommands:

    def test_add_and_show(self, run):
        result = _add_widget(run)
        assert result.exit_code == 0, result.output
        assert "Product #1 'Widget' added (code W-1)" in result.output

        shown = run("product", "show", "--id", "1")
        assert shown.exit_code == 0
        assert "code=W-1" in shown.output
        assert "Category:    tools" in shown.output

    def test_duplicate_code_fails(self, run):
        _add_widget(run)
        result = _add_widget(run)
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_list(self, run):
        _add_widget(run, "A")
        _add_widget(run, "B")
        result = run("product", "list", "--limit", "1")
        assert result.exit_code == 0
        assert "Page 1 of 2 (2 products)" in result.output

    def test_list_empty(self, run):
        assert "No products found." in run("product", "list").output

    def test_update(self, run):
        _add_widget(run)
        result = run("product", "update", "--id", "1", "--stock", "0", "--inactive")
        assert result.exit_code == 0
        assert "updated: status, stock" in result.output
        assert "(inactive)" in run("product", "show", "--id", "1").output

    def test_update_requires_a_field(self, run):
        _add_widget(run)
        result = run("product", "update", "--id", "1")
        assert result.exit_code == 1
        assert "Nothing to update" in result.output

    def test_delete_missing(self, run):
        result = run("product", "delete", "--id", "9")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestCartCommands:

    def test_create_add_show(self, run):
        _add_widget(run)
        assert "Cart #1 created" in run("cart", "create").output

        added = run("cart", "add", "--cart", "1", "--product", "1")
        assert added.exit_code == 0
        assert "added to cart #1 (1 line items)" in added.output

        shown = run("cart", "show", "--id", "1")
        assert "Widget" in shown.output

    def test_show_after_product_deleted(self, run):
        _add_widget(run)
        run("cart", "create")
        run("cart", "add", "--cart", "1", "--product", "1")
        run("product", "delete", "--id", "1")

        assert "(deleted)" in run("cart", "show", "--id", "1").output

    def test_add_to_missing_cart(self, run):
        _add_widget(run)
        result = run("cart", "add", "--cart", "4", "--product", "1")
        assert result.exit_code == 1
        assert "Cart not found" in result.output

    def test_show_empty(self, run):
        run("cart", "create")
        assert "(empty)" in run("cart", "show", "--id", "1").output
