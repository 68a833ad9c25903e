"""Variant registry keyed by capability name.

Built-in variants are registered at import time. Plugins extend the
registry through :func:`register_variant`; built-in keys are reserved.
"""

from __future__ import annotations

import inspect
from typing import Any

from solidctl.domain.discounts import Discount, HolidayDiscount, LoyaltyDiscount
from solidctl.domain.dispatch import Capability
from solidctl.domain.methods import CreditCard, PaymentMethod, PayPal
from solidctl.domain.payments import CardPayment, CashPayment, PaymentProcessor
from solidctl.domain.printers import MultifunctionPrinter, Printer, Scanner, SimplePrinter

CAPABILITIES: dict[str, type[Capability]] = {
    cap.capability_name: cap
    for cap in (Discount, PaymentProcessor, PaymentMethod, Printer, Scanner)
}

VARIANT_REGISTRY: dict[str, dict[str, type[Capability]]] = {}


def _builtin_variant_map() -> dict[str, dict[str, type[Capability]]]:
    return {
        "discount": {"holiday": HolidayDiscount, "loyalty": LoyaltyDiscount},
        "payment_processor": {"cash": CashPayment, "card": CardPayment},
        "payment_method": {"credit_card": CreditCard, "paypal": PayPal},
        "printer": {"simple": SimplePrinter, "multifunction": MultifunctionPrinter},
        "scanner": {"multifunction": MultifunctionPrinter},
    }


def _resolve_capability(capability: str | type[Capability]) -> type[Capability]:
    if isinstance(capability, str):
        try:
            return CAPABILITIES[capability]
        except KeyError:
            msg = f"Unknown capability {capability!r}"
            raise KeyError(msg) from None
    if not (inspect.isclass(capability) and issubclass(capability, Capability)):
        msg = f"{capability!r} is not a Capability"
        raise TypeError(msg)
    return capability


def register_variant(
    capability: str | type[Capability],
    key: str,
    variant_cls: type[Capability],
) -> None:
    """Register a custom variant under *capability*.

    The class must be a concrete subclass of the capability. Built-in keys
    cannot be overridden.
    """
    cap = _resolve_capability(capability)
    normalized_key = key.strip()
    if not normalized_key:
        msg = "Variant key must not be empty"
        raise ValueError(msg)

    if not (inspect.isclass(variant_cls) and issubclass(variant_cls, cap)):
        msg = f"Variant {normalized_key!r} must implement {cap.__name__}"
        raise TypeError(msg)

    if inspect.isabstract(variant_cls):
        missing = sorted(getattr(variant_cls, "__abstractmethods__", ()))
        msg = f"Variant {normalized_key!r} is abstract; missing {missing}"
        raise TypeError(msg)

    builtins = _builtin_variant_map().get(cap.capability_name, {})
    if normalized_key in builtins:
        msg = f"Variant {normalized_key!r} conflicts with a built-in {cap.capability_name}"
        raise ValueError(msg)

    VARIANT_REGISTRY.setdefault(cap.capability_name, {})[normalized_key] = variant_cls


def get_variant(capability: str | type[Capability], key: str, **kwargs: Any) -> Capability:
    """Construct the variant registered under *key*."""
    cap = _resolve_capability(capability)
    variants = VARIANT_REGISTRY.get(cap.capability_name, {})
    try:
        variant_cls = variants[key]
    except KeyError:
        msg = f"Unknown {cap.capability_name} variant {key!r}. Available: {sorted(variants)}"
        raise KeyError(msg) from None
    return variant_cls(**kwargs)


def list_variants() -> dict[str, list[str]]:
    """Return ``{capability: [variant keys]}`` with keys sorted."""
    return {cap: sorted(VARIANT_REGISTRY.get(cap, {})) for cap in sorted(CAPABILITIES)}


def reset_registry() -> None:
    """Restore the registry to its built-in contents."""
    VARIANT_REGISTRY.clear()
    for cap, variants in _builtin_variant_map().items():
        VARIANT_REGISTRY[cap] = dict(variants)


reset_registry()
