"""Tests for PaymentMethod variants and CheckoutProcessor."""

from __future__ import annotations

import pytest

from solidctl.domain.dispatch import CapabilityError
from solidctl.domain.methods import CheckoutProcessor, CreditCard, PayPal
from solidctl.domain.payments import CashPayment


class TestPaymentMethods:
    def test_credit_card(self) -> None:
        assert CreditCard().pay(100) == "Paid 100.000000 using Credit Card"

    def test_paypal(self) -> None:
        assert PayPal().pay(200) == "Paid 200.000000 using PayPal"


class TestCheckoutProcessor:
    def test_process_uses_injected_method(self) -> None:
        processor = CheckoutProcessor(CreditCard())
        assert processor.process(100) == "Paid 100.000000 using Credit Card"

    def test_swap_method_changes_only_label(self) -> None:
        processor = CheckoutProcessor(CreditCard())
        first = processor.process(100)
        processor.method = PayPal()
        second = processor.process(100)
        assert first.replace("Credit Card", "PayPal") == second

    def test_method_property(self) -> None:
        method = PayPal()
        assert CheckoutProcessor(method).method is method

    def test_rejects_non_payment_method(self) -> None:
        with pytest.raises(CapabilityError):
            CheckoutProcessor(CashPayment())  # type: ignore[arg-type]

    def test_rejects_non_payment_method_on_swap(self) -> None:
        processor = CheckoutProcessor(CreditCard())
        with pytest.raises(CapabilityError):
            processor.method = CashPayment()  # type: ignore[assignment]
        assert isinstance(processor.method, CreditCard)
