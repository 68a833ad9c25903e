"""PaymentService: liskov substitution demo.

One PaymentProcessor slot is rebound for every payment; the call site is
identical whichever processor is bound.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from solidctl.domain.dispatch import CapabilitySlot
from solidctl.domain.payments import PaymentProcessor
from solidctl.domain.registry import VARIANT_REGISTRY, get_variant
from solidctl.services.base import BaseService
from solidctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PaymentService(BaseService):
    def process(self, payments: Sequence[tuple[str, float]] | None = None) -> ServiceResult:
        """Process ``(kind, amount)`` pairs in order."""
        if payments is None:
            defaults = self._settings.defaults
            payments = [("cash", defaults.cash_amount), ("card", defaults.card_amount)]

        capability = PaymentProcessor.capability_name
        known = VARIANT_REGISTRY.get(capability, {})
        for kind, _amount in payments:
            if kind not in known:
                return self._unknown_variant("lsp", capability, kind)

        slot: CapabilitySlot[PaymentProcessor] = CapabilitySlot(PaymentProcessor)
        warnings: list[str] = []
        processed: list[dict[str, object]] = []
        for kind, amount in payments:
            slot.bind(get_variant(PaymentProcessor, kind))
            message = slot.invoke(amount)
            processed.append({"kind": kind, "amount": amount, "message": message})
            self._dispatch_event(
                "post_invoke",
                {"capability": capability, "variant": kind, "result": message},
                warnings,
            )

        logger.debug("Processed %d payments", len(processed))
        return ServiceResult(
            ok=True,
            op="lsp",
            data={
                "payments": processed,
                "lines": [p["message"] for p in processed],
            },
            warnings=warnings,
        )
