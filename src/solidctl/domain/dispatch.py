"""Capability ABC and the strategy dispatcher slot.

A capability is a single-method contract. Variants are concrete subclasses
that implement it. A :class:`CapabilitySlot` holds exactly one variant and
forwards calls to it, so the caller never branches on the concrete type.

INVARIANT: only full implementations can be bound. ABC instantiation
already rejects classes with a missing abstract method; ``bind`` rejects
values that are not instances of the slot's capability.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, ClassVar, Generic, TypeVar

logger = logging.getLogger(__name__)


class Capability(ABC):
    """Abstract base for single-operation contracts.

    Subclasses set :attr:`operation` to the name of their one abstract
    method and :attr:`capability_name` to the registry key.
    """

    capability_name: ClassVar[str] = ""
    operation: ClassVar[str] = ""


C = TypeVar("C", bound=Capability)


class CapabilityError(TypeError):
    """Raised when a value does not conform to a slot's capability."""


class UnboundSlotError(RuntimeError):
    """Raised when invoking a slot that has no variant bound."""


class CapabilitySlot(Generic[C]):
    """A reference to one variant, typed by its capability.

    Usage::

        slot = CapabilitySlot(Discount).bind(HolidayDiscount())
        slot.invoke(1000)  # 900.0
    """

    def __init__(self, capability: type[C], variant: C | None = None) -> None:
        if not capability.operation:
            msg = f"{capability.__name__} does not declare an operation"
            raise CapabilityError(msg)
        self._capability = capability
        self._variant: C | None = None
        if variant is not None:
            self.bind(variant)

    @property
    def capability(self) -> type[C]:
        return self._capability

    @property
    def variant(self) -> C | None:
        """The currently bound variant, or None."""
        return self._variant

    @property
    def is_bound(self) -> bool:
        return self._variant is not None

    def bind(self, variant: C) -> CapabilitySlot[C]:
        """Replace the bound variant. Returns the slot for chaining."""
        if not isinstance(variant, self._capability):
            msg = (
                f"{type(variant).__name__} does not implement "
                f"{self._capability.__name__}.{self._capability.operation}"
            )
            raise CapabilityError(msg)
        self._variant = variant
        logger.debug(
            "Bound %s to %s slot",
            type(variant).__name__,
            self._capability.__name__,
        )
        return self

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        """Call the bound variant's operation and return its result."""
        if self._variant is None:
            msg = f"No variant bound to {self._capability.__name__} slot"
            raise UnboundSlotError(msg)
        method = getattr(self._variant, self._capability.operation)
        return method(*args, **kwargs)


def bind(slot: CapabilitySlot[C], variant: C) -> CapabilitySlot[C]:
    """Functional form of :meth:`CapabilitySlot.bind`."""
    return slot.bind(variant)


def invoke(slot: CapabilitySlot[C], *args: Any, **kwargs: Any) -> Any:
    """Functional form of :meth:`CapabilitySlot.invoke`."""
    return slot.invoke(*args, **kwargs)


def format_amount(amount: float) -> str:
    """Render an amount the way the payment messages do (six decimals)."""
    return f"{amount:f}"


def format_number(value: float) -> str:
    """Render a computed number compactly: ``900`` rather than ``900.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
