"""Tests for Discount variants."""

from __future__ import annotations

import pytest

from solidctl.domain.discounts import Discount, HolidayDiscount, LoyaltyDiscount
from solidctl.domain.dispatch import CapabilitySlot


class TestRates:
    def test_holiday_rate(self) -> None:
        assert HolidayDiscount.RATE == 0.9

    def test_loyalty_rate(self) -> None:
        assert LoyaltyDiscount.RATE == 0.85

    @pytest.mark.parametrize("variant_cls", [HolidayDiscount, LoyaltyDiscount])
    @pytest.mark.parametrize("amount", [0, 1, 99.99, 1000, 123456.78])
    def test_apply_is_amount_times_rate(self, variant_cls: type[Discount], amount: float) -> None:
        variant = variant_cls()
        assert variant.apply_discount(amount) == pytest.approx(amount * variant.rate)

    def test_rate_override(self) -> None:
        assert HolidayDiscount(rate=0.5).apply_discount(1000) == pytest.approx(500)

    def test_labels(self) -> None:
        assert HolidayDiscount.label == "Holiday Discount"
        assert LoyaltyDiscount.label == "Loyalty Discount"


class TestScenario:
    def test_holiday_then_loyalty(self) -> None:
        slot: CapabilitySlot[Discount] = CapabilitySlot(Discount)
        assert slot.bind(HolidayDiscount()).invoke(1000) == pytest.approx(900)
        assert slot.bind(LoyaltyDiscount()).invoke(1000) == pytest.approx(850)

    def test_base_discount_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Discount()  # type: ignore[abstract]
