"""VariantService: introspection over the variant registry."""

from __future__ import annotations

from solidctl.domain.registry import list_variants
from solidctl.services.base import BaseService
from solidctl.services.result import ServiceResult


class VariantService(BaseService):
    def list(self) -> ServiceResult:
        plugins = self._plugins.list_plugin_names() if self._plugins else []
        return ServiceResult(
            ok=True,
            op="variants",
            data={"capabilities": list_variants(), "plugins": plugins},
        )
