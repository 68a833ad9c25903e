"""Rich/JSON output helpers.

Human mode prints the demo's console lines exactly as produced. Verbose
mode adds the operation header and the remaining result data. JSON mode
serializes the whole ServiceResult.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from solidctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from solidctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[solid.error]ERROR:[/solid.error] [solid.op]{escape(result.op)}[/solid.op]: "
            f"{escape(message)}",
            soft_wrap=True,
        )
        return get_output(console).rstrip("\n")

    lines: list[str] = list(result.data.get("lines", []))
    extra = {k: v for k, v in result.data.items() if k != "lines"}

    if settings.verbose:
        console.print(f"[solid.ok]OK:[/solid.ok] [solid.op]{escape(result.op)}[/solid.op]")
    for line in lines:
        console.print(escape(line), soft_wrap=True)
    if extra and (settings.verbose or (not lines and not settings.quiet)):
        for key, value in extra.items():
            console.print(
                f"  [solid.key]{escape(key)}:[/solid.key] {escape(_format_value(value))}",
                soft_wrap=True,
            )
    return get_output(console).rstrip("\n")
