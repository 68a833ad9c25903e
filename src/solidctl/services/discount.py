"""DiscountService: open/closed demo.

Kinds are looked up in the variant registry, so plugin-provided discounts
work without touching this module.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from solidctl.domain.discounts import Discount
from solidctl.domain.dispatch import CapabilitySlot, format_number
from solidctl.domain.registry import VARIANT_REGISTRY, get_variant
from solidctl.services.base import BaseService
from solidctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

DEFAULT_KINDS = ("holiday", "loyalty")


class DiscountService(BaseService):
    def _rate_overrides(self, kind: str) -> dict[str, Any]:
        cfg = self._settings.discount
        rates = {"holiday": cfg.holiday_rate, "loyalty": cfg.loyalty_rate}
        return {"rate": rates[kind]} if kind in rates else {}

    def apply(
        self,
        amount: float | None = None,
        kinds: Sequence[str] = DEFAULT_KINDS,
    ) -> ServiceResult:
        """Apply each discount kind in turn through one Discount slot."""
        if amount is None:
            amount = self._settings.defaults.discount_amount
        # Repeated kinds collapse so results and lines stay one-to-one.
        kinds = list(dict.fromkeys(kinds))

        known = VARIANT_REGISTRY.get(Discount.capability_name, {})
        for kind in kinds:
            if kind not in known:
                return self._unknown_variant("ocp", Discount.capability_name, kind)

        slot: CapabilitySlot[Discount] = CapabilitySlot(Discount)
        warnings: list[str] = []
        lines: list[str] = []
        results: dict[str, float] = {}
        for kind in kinds:
            discount = get_variant(Discount, kind, **self._rate_overrides(kind))
            value = slot.bind(discount).invoke(amount)
            logger.debug("Applied %r to %s -> %s", discount, amount, value)
            results[kind] = value
            lines.append(f"{discount.label}: {format_number(value)}")
            self._dispatch_event(
                "post_invoke",
                {"capability": Discount.capability_name, "variant": kind, "result": value},
                warnings,
            )

        return ServiceResult(
            ok=True,
            op="ocp",
            data={"amount": amount, "results": results, "lines": lines},
            warnings=warnings,
        )
