"""Tests for CapabilitySlot: binding and invocation."""

from __future__ import annotations

from abc import abstractmethod

import pytest

from solidctl.domain.discounts import Discount, HolidayDiscount, LoyaltyDiscount
from solidctl.domain.dispatch import (
    Capability,
    CapabilityError,
    CapabilitySlot,
    UnboundSlotError,
    bind,
    format_amount,
    format_number,
    invoke,
)
from solidctl.domain.methods import PaymentMethod, PayPal
from solidctl.domain.payments import CardPayment, CashPayment, PaymentProcessor


class _Greeter(Capability):
    capability_name = "greeter"
    operation = "greet"

    @abstractmethod
    def greet(self, name: str) -> str: ...


class _Hello(_Greeter):
    def greet(self, name: str) -> str:
        return f"hello {name}"


class _PartialGreeter(_Greeter):
    pass


class TestBind:
    def test_bind_conforming_variant(self) -> None:
        slot: CapabilitySlot[Discount] = CapabilitySlot(Discount)
        variant = HolidayDiscount()
        assert slot.bind(variant) is slot
        assert slot.variant is variant
        assert slot.is_bound

    def test_bind_via_constructor(self) -> None:
        slot = CapabilitySlot(Discount, LoyaltyDiscount())
        assert isinstance(slot.variant, LoyaltyDiscount)

    def test_rebind_replaces_variant(self) -> None:
        slot = CapabilitySlot(PaymentProcessor, CashPayment())
        slot.bind(CardPayment())
        assert isinstance(slot.variant, CardPayment)

    def test_bind_wrong_capability_rejected(self) -> None:
        slot = CapabilitySlot(Discount)
        with pytest.raises(CapabilityError, match="PayPal"):
            slot.bind(PayPal())  # type: ignore[arg-type]
        assert not slot.is_bound

    def test_bind_plain_object_rejected(self) -> None:
        with pytest.raises(CapabilityError):
            CapabilitySlot(PaymentMethod, object())  # type: ignore[arg-type]

    def test_capability_error_is_type_error(self) -> None:
        assert issubclass(CapabilityError, TypeError)

    def test_partial_implementation_cannot_be_constructed(self) -> None:
        with pytest.raises(TypeError):
            _PartialGreeter()  # type: ignore[abstract]

    def test_capability_without_operation_rejected(self) -> None:
        with pytest.raises(CapabilityError):
            CapabilitySlot(Capability)

    def test_functional_bind(self) -> None:
        slot = CapabilitySlot(_Greeter)
        assert bind(slot, _Hello()) is slot


class TestInvoke:
    def test_invoke_forwards_to_variant(self) -> None:
        slot = CapabilitySlot(_Greeter, _Hello())
        assert slot.invoke("world") == "hello world"

    def test_functional_invoke(self) -> None:
        slot = CapabilitySlot(Discount, HolidayDiscount())
        assert invoke(slot, 1000) == pytest.approx(900)

    def test_invoke_unbound_slot(self) -> None:
        slot = CapabilitySlot(Discount)
        with pytest.raises(UnboundSlotError):
            slot.invoke(100)

    def test_same_input_same_output(self) -> None:
        slot = CapabilitySlot(Discount, LoyaltyDiscount())
        assert slot.invoke(123.45) == slot.invoke(123.45)

    def test_swapping_variant_keeps_call_shape(self) -> None:
        """Only the bound variant changes; the call site is identical."""
        slot = CapabilitySlot(PaymentProcessor)
        outputs = [slot.bind(variant).invoke(100) for variant in (CashPayment(), CardPayment())]
        assert "cash" in outputs[0]
        assert "card" in outputs[1]


class TestFormatting:
    def test_format_amount_six_decimals(self) -> None:
        assert format_amount(100) == "100.000000"
        assert format_amount(12.5) == "12.500000"

    def test_format_number_integral(self) -> None:
        assert format_number(900.0) == "900"

    def test_format_number_fractional(self) -> None:
        assert format_number(900.5) == "900.5"
