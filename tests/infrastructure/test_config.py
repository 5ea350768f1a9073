"""Tests for settings loading and backend selection."""

import pytest

from shop.infrastructure.bootstrap import build_repositories
from shop.infrastructure.config import load_settings
from shop.infrastructure.persistence.json_product_repository import JsonProductRepository
from shop.infrastructure.persistence.mongo import connect

ENV_KEYS = ("SHOP_STORAGE", "SHOP_DATA_DIR", "MONGODB_URI", "MONGODB_DB", "HOST", "PORT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()
        assert settings.storage == "file"
        assert settings.port == 8080
        assert settings.mongodb_uri == "mongodb://127.0.0.1:27017/tienda"
        assert settings.log_level == "INFO"
        assert settings.mongodb_database is None

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SHOP_STORAGE", "MONGO")
        monkeypatch.setenv("SHOP_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("MONGODB_DB", "shop_test")
        settings = load_settings()
        assert settings.storage == "mongo"
        assert settings.data_dir == tmp_path
        assert settings.port == 9000
        assert settings.mongodb_database == "shop_test"

    def test_unknown_storage(self, monkeypatch):
        monkeypatch.setenv("SHOP_STORAGE", "redis")
        with pytest.raises(RuntimeError, match="SHOP_STORAGE"):
            load_settings()

    def test_bad_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "eighty")
        with pytest.raises(RuntimeError, match="PORT"):
            load_settings()


class TestBuildRepositories:

    def test_file_backend(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SHOP_DATA_DIR", str(tmp_path))
        repos = build_repositories(load_settings())
        assert isinstance(repos.products, JsonProductRepository)
        assert (tmp_path / "products.json").exists()
        assert (tmp_path / "carts.json").exists()


class TestMongoDatabaseChoice:

    @pytest.mark.parametrize("uri, database, expected", [
        ("mongodb://127.0.0.1:27017/tienda", "otherdb", "otherdb"),
        ("mongodb://127.0.0.1:27017/fromuri", None, "fromuri"),
        ("mongodb://127.0.0.1:27017", None, "tienda"),
    ])
    def test_database_name(self, uri, database, expected):
        client, db = connect(uri, database)
        try:
            assert db.name == expected
        finally:
            client.close()

    def test_settings_database_reaches_connect(self, monkeypatch):
        monkeypatch.setenv("MONGODB_DB", "otherdb")
        settings = load_settings()
        client, db = connect(settings.mongodb_uri, settings.mongodb_database)
        try:
            assert db.name == "otherdb"
        finally:
            client.close()
