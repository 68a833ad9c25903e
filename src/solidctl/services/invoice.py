"""InvoiceService: single responsibility demo.

Tax calculation lives on the invoice; formatting lives on the printer.
"""

from __future__ import annotations

import logging

from solidctl.domain.invoice import Invoice, InvoicePrinter
from solidctl.services.base import BaseService
from solidctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class InvoiceService(BaseService):
    def describe(
        self,
        invoice_id: int | None = None,
        amount: float | None = None,
    ) -> ServiceResult:
        """Build an invoice, compute its tax and print it."""
        defaults = self._settings.defaults
        invoice = Invoice(
            id=defaults.invoice_id if invoice_id is None else invoice_id,
            amount=defaults.invoice_amount if amount is None else amount,
            tax_rate=self._settings.invoice.tax_rate,
        )
        line = InvoicePrinter().print_invoice(invoice)
        tax = invoice.calculate_tax()
        logger.debug("Invoice %s tax computed: %s", invoice.id, tax)
        return ServiceResult(
            ok=True,
            op="srp",
            data={
                "id": invoice.id,
                "amount": invoice.amount,
                "tax": tax,
                "lines": [line],
            },
        )
