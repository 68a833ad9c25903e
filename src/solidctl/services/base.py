"""BaseService: shared foundation for the demo services.

Every service receives the resolved :class:`SolidSettings` and, optionally,
a loaded :class:`PluginManager` used to announce invocations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from solidctl.domain.registry import VARIANT_REGISTRY
from solidctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from solidctl.config.settings import SolidSettings
    from solidctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

UNKNOWN_VARIANT = "UNKNOWN_VARIANT"


class BaseService:
    """Base for all service-layer classes."""

    def __init__(
        self,
        settings: SolidSettings,
        plugins: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a plugin hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")

    @staticmethod
    def _unknown_variant(op: str, capability: str, key: str) -> ServiceResult:
        available = sorted(VARIANT_REGISTRY.get(capability, {}))
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=UNKNOWN_VARIANT,
                message=f"Unknown {capability} variant: {key}",
                detail={"capability": capability, "variant": key, "available": available},
            ),
        )
