"""Subcommand modules for solidctl.

register_commands() uses deferred imports to keep ``solidctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register one command per principle plus the aggregate commands."""
    from solidctl.commands.demos import all_cmd, dip, isp, lsp, ocp, srp
    from solidctl.commands.variants import variants

    for command in (srp, ocp, lsp, isp, dip, all_cmd, variants):
        cli.add_command(command)
