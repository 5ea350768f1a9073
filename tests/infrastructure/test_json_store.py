"""Tests for the flat-file collection helpers."""

import json

import pytest

from shop.infrastructure.persistence.json_store import (
    next_id,
    numeric_id,
    read_collection,
    write_collection,
)


class TestReadWrite:

    def test_missing_file_is_created_empty(self, tmp_path):
        path = tmp_path / "nested" / "items.json"
        assert read_collection(path) == []
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_round_trip_keeps_unicode(self, tmp_path):
        path = tmp_path / "items.json"
        write_collection(path, [{"id": 1, "title": "Café"}])
        assert read_collection(path) == [{"id": 1, "title": "Café"}]
        assert "Café" in path.read_text(encoding="utf-8")

    @pytest.mark.parametrize("content", ["", "{not json", '{"id": 1}', "42"])
    def test_corrupt_file_is_reset(self, tmp_path, content):
        path = tmp_path / "items.json"
        path.write_text(content, encoding="utf-8")

        assert read_collection(path) == []
        assert json.loads(path.read_text(encoding="utf-8")) == []


class TestIds:

    @pytest.mark.parametrize("value, expected", [
        (3, 3), ("7", 7), (2.0, 2), (2.5, None), ("abc", None),
        (None, None), (True, None), (float("nan"), None),
    ])
    def test_numeric_id(self, value, expected):
        assert numeric_id(value) == expected

    def test_next_id_on_empty(self):
        assert next_id([]) == 1

    def test_next_id_skips_invalid_ids(self):
        records = [{"id": 4}, {"id": "x"}, {}, {"id": 2}, "stray", None]
        assert next_id(records) == 5

    def test_next_id_never_below_one(self):
        assert next_id([{"id": -10}]) == 1
