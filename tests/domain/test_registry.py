"""Tests for the variant registry."""

from __future__ import annotations

import pytest

from solidctl.domain.discounts import Discount, HolidayDiscount
from solidctl.domain.methods import PayPal
from solidctl.domain.registry import (
    VARIANT_REGISTRY,
    get_variant,
    list_variants,
    register_variant,
    reset_registry,
)


class _StaffDiscount(Discount):
    RATE = 0.5
    label = "Staff Discount"

    def apply_discount(self, amount: float) -> float:
        return amount * self.rate


class _AbstractDiscount(Discount):
    pass


class TestBuiltins:
    def test_all_capabilities_listed(self) -> None:
        assert list_variants() == {
            "discount": ["holiday", "loyalty"],
            "payment_method": ["credit_card", "paypal"],
            "payment_processor": ["card", "cash"],
            "printer": ["multifunction", "simple"],
            "scanner": ["multifunction"],
        }

    def test_get_variant(self) -> None:
        assert isinstance(get_variant("discount", "holiday"), HolidayDiscount)

    def test_get_variant_by_class(self) -> None:
        assert isinstance(get_variant(Discount, "holiday"), HolidayDiscount)

    def test_get_variant_kwargs(self) -> None:
        variant = get_variant("discount", "holiday", rate=0.75)
        assert variant.rate == 0.75  # type: ignore[attr-defined]

    def test_unknown_variant(self) -> None:
        with pytest.raises(KeyError, match="bogus"):
            get_variant("discount", "bogus")

    def test_unknown_capability(self) -> None:
        with pytest.raises(KeyError):
            get_variant("teleporter", "holiday")


class TestRegisterVariant:
    def test_register_custom(self) -> None:
        register_variant("discount", "staff", _StaffDiscount)
        assert VARIANT_REGISTRY["discount"]["staff"] is _StaffDiscount
        assert "staff" in list_variants()["discount"]

    def test_key_is_stripped(self) -> None:
        register_variant(Discount, "  staff ", _StaffDiscount)
        assert "staff" in VARIANT_REGISTRY["discount"]

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            register_variant("discount", "  ", _StaffDiscount)

    def test_wrong_capability_rejected(self) -> None:
        with pytest.raises(TypeError):
            register_variant("discount", "paypal", PayPal)  # type: ignore[arg-type]

    def test_abstract_variant_rejected(self) -> None:
        with pytest.raises(TypeError, match="apply_discount"):
            register_variant("discount", "partial", _AbstractDiscount)

    def test_builtin_key_reserved(self) -> None:
        with pytest.raises(ValueError, match="built-in"):
            register_variant("discount", "holiday", _StaffDiscount)

    def test_not_a_capability(self) -> None:
        with pytest.raises(TypeError):
            register_variant(dict, "x", _StaffDiscount)  # type: ignore[arg-type]

    def test_reset_drops_custom(self) -> None:
        register_variant("discount", "staff", _StaffDiscount)
        reset_registry()
        assert "staff" not in VARIANT_REGISTRY["discount"]
