"""PrinterService: interface segregation demo."""

from __future__ import annotations

from collections.abc import Sequence

from solidctl.domain.dispatch import CapabilitySlot
from solidctl.domain.printers import Printer, Scanner, capabilities_of
from solidctl.domain.registry import VARIANT_REGISTRY, get_variant
from solidctl.services.base import BaseService
from solidctl.services.result import ServiceResult

DEFAULT_DEVICES = ("simple", "multifunction")


class PrinterService(BaseService):
    def run(self, devices: Sequence[str] = DEFAULT_DEVICES) -> ServiceResult:
        """Exercise every capability each device actually exposes.

        Output lines are collected instead of echoed so the CLI decides
        where they go.
        """
        known = VARIANT_REGISTRY.get(Printer.capability_name, {})
        for key in devices:
            if key not in known:
                return self._unknown_variant("isp", Printer.capability_name, key)

        lines: list[str] = []
        warnings: list[str] = []
        exposed: dict[str, list[str]] = {}
        for key in devices:
            device = get_variant(Printer, key, echo=lines.append)
            exposed[key] = capabilities_of(device)
            for capability in (Printer, Scanner):
                if capability.capability_name not in exposed[key]:
                    continue
                CapabilitySlot(capability, device).invoke()
                self._dispatch_event(
                    "post_invoke",
                    {"capability": capability.capability_name, "variant": key, "result": None},
                    warnings,
                )

        return ServiceResult(
            ok=True,
            op="isp",
            data={"devices": exposed, "lines": lines},
            warnings=warnings,
        )
