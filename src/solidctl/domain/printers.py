"""Printer and Scanner capabilities: segregated interfaces.

A device implements only the capabilities it actually has. A simple
printer is never forced to stub out scanning.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable

import click

from solidctl.domain.dispatch import Capability

Echo = Callable[[str], None]


class Device(Capability):
    """Output sink shared by every device capability.

    Devices write through ``echo`` so callers decide where output goes.
    """

    def __init__(self, echo: Echo | None = None) -> None:
        self._echo: Echo = echo or click.echo


class Printer(Device):
    capability_name = "printer"
    operation = "print_document"

    @abstractmethod
    def print_document(self) -> None:
        ...


class Scanner(Device):
    capability_name = "scanner"
    operation = "scan_document"

    @abstractmethod
    def scan_document(self) -> None:
        ...


class SimplePrinter(Printer):
    def print_document(self) -> None:
        self._echo("Printing document")


class MultifunctionPrinter(Printer, Scanner):
    def print_document(self) -> None:
        self._echo("Printing document")

    def scan_document(self) -> None:
        self._echo("Scanning document")


def capabilities_of(device: object) -> list[str]:
    """Names of the device capabilities *device* implements."""
    return [cap.capability_name for cap in (Printer, Scanner) if isinstance(device, cap)]
