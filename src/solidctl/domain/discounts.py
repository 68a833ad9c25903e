"""Discount capability: open for extension, closed for modification.

New discount kinds are added as new :class:`Discount` subclasses (or via
the ``register_variants`` plugin hook); existing kinds are never edited.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from solidctl.domain.dispatch import Capability


class Discount(Capability):
    """Reduce an amount by a fixed rate."""

    capability_name = "discount"
    operation = "apply_discount"

    RATE: ClassVar[float] = 1.0
    label: ClassVar[str] = "Discount"

    def __init__(self, rate: float | None = None) -> None:
        self.rate = self.RATE if rate is None else rate

    @abstractmethod
    def apply_discount(self, amount: float) -> float:
        """Return the discounted amount."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self.rate})"


class HolidayDiscount(Discount):
    """10% off."""

    RATE = 0.9
    label = "Holiday Discount"

    def apply_discount(self, amount: float) -> float:
        return amount * self.rate


class LoyaltyDiscount(Discount):
    """15% off for loyalty members."""

    RATE = 0.85
    label = "Loyalty Discount"

    def apply_discount(self, amount: float) -> float:
        return amount * self.rate
