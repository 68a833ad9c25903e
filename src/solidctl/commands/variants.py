"""Command: list registered variants per capability."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidCommand

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.command(cls=SolidCommand, examples="  solidctl variants\n  solidctl --json variants")
@click.pass_obj
def variants(app: AppContext) -> None:
    """List the variants registered for each capability."""
    from solidctl.services.variants import VariantService

    app.emit(VariantService(app.settings, app.plugins).list())
