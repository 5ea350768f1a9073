"""Unit tests for domain value objects."""

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import EntityId, Quantity


# ── EntityId ─────────────────────────────────────────────────────────────────


class TestEntityId:

    def test_of_int(self):
        assert EntityId.of(7) == EntityId("7")

    def test_of_string_is_stripped(self):
        assert str(EntityId.of(" 65f0c0ffee ")) == "65f0c0ffee"

    def test_of_existing_id_is_identity(self):
        pid = EntityId("3")
        assert EntityId.of(pid) is pid

    def test_numeric_view(self):
        assert EntityId("12").as_int() == 12
        assert EntityId("12.0").as_int() == 12

    def test_opaque_ids_have_no_numeric_view(self):
        assert EntityId("65f0c1a2b3c4d5e6f7a8b9c0").as_int() is None
        assert EntityId("inf").as_int() is None
        assert EntityId("1.5").as_int() is None

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="Invalid id"):
            EntityId.of("  ")

    def test_none_and_bool_rejected(self):
        with pytest.raises(ValidationError):
            EntityId.of(None)
        with pytest.raises(ValidationError):
            EntityId.of(True)

    def test_leading_zeros_name_the_same_id(self):
        assert EntityId("01") == EntityId("1")
        assert hash(EntityId("01")) == hash(EntityId("1"))
        assert str(EntityId("01")) == "01"

    def test_opaque_ids_compare_as_text(self):
        assert EntityId("65f0c0ffee") != EntityId("65F0C0FFEE")
        assert EntityId("1") != EntityId("1.5")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_creation(self):
        assert Quantity(3).value == 3

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_add(self):
        assert Quantity(2) + 1 == Quantity(3)

    def test_of_numeric_string(self):
        assert Quantity.of("4") == Quantity(4)

    def test_of_whole_float(self):
        assert Quantity.of(2.0) == Quantity(2)

    @pytest.mark.parametrize("raw", [None, "abc", 0, -1, 1.5, float("nan"), True, [1]])
    def test_of_rejects_junk(self, raw):
        with pytest.raises(ValidationError):
            Quantity.of(raw)
