"""Invoice model and printer: single responsibility.

The invoice knows how to compute its tax. Rendering it for display is a
separate concern owned by :class:`InvoicePrinter`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from solidctl.domain.dispatch import format_amount


@dataclass(frozen=True)
class Invoice:
    """A billed amount identified by an integer id."""

    TAX_RATE: ClassVar[float] = 0.15

    id: int
    amount: float
    tax_rate: float = TAX_RATE

    def calculate_tax(self) -> float:
        return self.amount * self.tax_rate


class InvoicePrinter:
    """Formats invoices for display. Holds no invoice state."""

    def print_invoice(self, invoice: Invoice) -> str:
        return f"Invoice ID: {invoice.id}, Amount: {format_amount(invoice.amount)}"
