"""PaymentMethod capability and the checkout that depends on it.

:class:`CheckoutProcessor` is the high-level module: it depends only on
the :class:`PaymentMethod` abstraction, never on a concrete method.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, cast

from solidctl.domain.dispatch import Capability, CapabilitySlot, format_amount


class PaymentMethod(Capability):
    capability_name = "payment_method"
    operation = "pay"

    label: ClassVar[str] = ""

    @abstractmethod
    def pay(self, amount: float) -> str:
        ...


class CreditCard(PaymentMethod):
    label = "Credit Card"

    def pay(self, amount: float) -> str:
        return f"Paid {format_amount(amount)} using {self.label}"


class PayPal(PaymentMethod):
    label = "PayPal"

    def pay(self, amount: float) -> str:
        return f"Paid {format_amount(amount)} using {self.label}"


class CheckoutProcessor:
    """Processes payments through whichever method is injected."""

    def __init__(self, method: PaymentMethod) -> None:
        self._slot: CapabilitySlot[PaymentMethod] = CapabilitySlot(PaymentMethod, method)

    @property
    def method(self) -> PaymentMethod:
        return cast(PaymentMethod, self._slot.variant)

    @method.setter
    def method(self, method: PaymentMethod) -> None:
        self._slot.bind(method)

    def process(self, amount: float) -> str:
        return self._slot.invoke(amount)
