"""CheckoutService: dependency inversion demo.

The high-level :class:`CheckoutProcessor` receives its payment method from
here; it never constructs one itself.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from solidctl.domain.methods import CheckoutProcessor, PaymentMethod
from solidctl.domain.registry import VARIANT_REGISTRY, get_variant
from solidctl.services.base import BaseService
from solidctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CheckoutService(BaseService):
    def process(self, payments: Sequence[tuple[str, float]] | None = None) -> ServiceResult:
        """Run ``(method, amount)`` pairs through one checkout processor."""
        if payments is None:
            defaults = self._settings.defaults
            payments = [
                ("credit_card", defaults.credit_card_amount),
                ("paypal", defaults.paypal_amount),
            ]

        capability = PaymentMethod.capability_name
        known = VARIANT_REGISTRY.get(capability, {})
        for kind, _amount in payments:
            if kind not in known:
                return self._unknown_variant("dip", capability, kind)

        processor: CheckoutProcessor | None = None
        warnings: list[str] = []
        lines: list[str] = []
        for kind, amount in payments:
            method = get_variant(PaymentMethod, kind)
            if processor is None:
                processor = CheckoutProcessor(method)
            else:
                processor.method = method
            message = processor.process(amount)
            logger.debug("Checkout via %s: %s", kind, message)
            lines.append(message)
            self._dispatch_event(
                "post_invoke",
                {"capability": capability, "variant": kind, "result": message},
                warnings,
            )

        return ServiceResult(ok=True, op="dip", data={"lines": lines}, warnings=warnings)
