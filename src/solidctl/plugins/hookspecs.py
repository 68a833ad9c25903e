"""Pluggy hook specifications for solidctl.

One setup-time hook lets plugins add variants to existing capabilities.
One event hook fires after every strategy invocation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from solidctl.domain.dispatch import Capability

hookspec = pluggy.HookspecMarker("solidctl")


class SolidctlHookSpec:
    """Hook specifications for the solidctl plugin system."""

    @hookspec
    def register_variants(self) -> dict[str, dict[str, type[Capability]]] | None:
        """Return ``{capability: {key: variant_cls}}`` to extend VARIANT_REGISTRY."""

    @hookspec
    def post_invoke(self, capability: str, variant: str, result: Any) -> None:
        """Called after a variant bound to a capability slot has been invoked."""
