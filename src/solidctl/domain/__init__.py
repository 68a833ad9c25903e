"""Domain layer: capabilities, variants and the strategy dispatcher."""

from solidctl.domain.dispatch import (
    Capability,
    CapabilityError,
    CapabilitySlot,
    UnboundSlotError,
    bind,
    invoke,
)

__all__ = [
    "Capability",
    "CapabilityError",
    "CapabilitySlot",
    "UnboundSlotError",
    "bind",
    "invoke",
]
