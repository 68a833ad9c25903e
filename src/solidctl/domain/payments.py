"""PaymentProcessor capability: substitutable processors.

Any processor can stand in for another: the caller holds a
``CapabilitySlot[PaymentProcessor]`` and only the returned message changes.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from solidctl.domain.dispatch import Capability, format_amount


class PaymentProcessor(Capability):
    capability_name = "payment_processor"
    operation = "process_payment"

    label: ClassVar[str] = ""

    @abstractmethod
    def process_payment(self, amount: float) -> str:
        """Process *amount* and return a description of what happened."""
        ...


class CashPayment(PaymentProcessor):
    label = "Cash"

    def process_payment(self, amount: float) -> str:
        return f"Processing cash payment of {format_amount(amount)}"


class CardPayment(PaymentProcessor):
    label = "Card"

    def process_payment(self, amount: float) -> str:
        return f"Processing card payment of {format_amount(amount)}"
