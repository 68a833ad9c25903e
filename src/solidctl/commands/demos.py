"""Commands: one runnable demo per SOLID principle, plus ``all``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidCommand

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext
    from solidctl.services.result import ServiceResult

AMOUNT = click.FloatRange(min=0)

PRINCIPLES: dict[str, str] = {
    "srp": "Single Responsibility",
    "ocp": "Open/Closed",
    "lsp": "Liskov Substitution",
    "isp": "Interface Segregation",
    "dip": "Dependency Inversion",
}


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl srp
  solidctl srp --id 7 --amount 250""",
)
@click.option("--id", "invoice_id", type=int, default=None, help="Invoice id.")
@click.option("--amount", type=AMOUNT, default=None, help="Invoice amount.")
@click.pass_obj
def srp(app: AppContext, invoice_id: int | None, amount: float | None) -> None:
    """Single responsibility: invoice math apart from invoice printing."""
    from solidctl.services.invoice import InvoiceService

    app.emit(InvoiceService(app.settings, app.plugins).describe(invoice_id, amount))


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl ocp
  solidctl ocp --amount 200 --discount loyalty
  solidctl --json ocp -d holiday -d loyalty""",
)
@click.option("--amount", type=AMOUNT, default=None, help="Amount before discount.")
@click.option(
    "-d",
    "--discount",
    "kinds",
    multiple=True,
    help="Discount kind to apply (repeatable). Default: holiday and loyalty.",
)
@click.pass_obj
def ocp(app: AppContext, amount: float | None, kinds: tuple[str, ...]) -> None:
    """Open/closed: new discount kinds without editing existing ones."""
    from solidctl.services.discount import DEFAULT_KINDS, DiscountService

    svc = DiscountService(app.settings, app.plugins)
    app.emit(svc.apply(amount, kinds or DEFAULT_KINDS))


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl lsp
  solidctl lsp --cash 20 --card 80""",
)
@click.option("--cash", type=AMOUNT, default=None, help="Cash payment amount.")
@click.option("--card", type=AMOUNT, default=None, help="Card payment amount.")
@click.pass_obj
def lsp(app: AppContext, cash: float | None, card: float | None) -> None:
    """Liskov substitution: any processor can stand in for another."""
    from solidctl.services.payment import PaymentService

    defaults = app.settings.defaults
    payments = [
        ("cash", defaults.cash_amount if cash is None else cash),
        ("card", defaults.card_amount if card is None else card),
    ]
    app.emit(PaymentService(app.settings, app.plugins).process(payments))


@click.command(cls=SolidCommand, examples="  solidctl isp")
@click.pass_obj
def isp(app: AppContext) -> None:
    """Interface segregation: devices implement only what they support."""
    from solidctl.services.printer import PrinterService

    app.emit(PrinterService(app.settings, app.plugins).run())


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl dip
  solidctl dip --credit-card 50 --paypal 75""",
)
@click.option("--credit-card", type=AMOUNT, default=None, help="Credit card amount.")
@click.option("--paypal", type=AMOUNT, default=None, help="PayPal amount.")
@click.pass_obj
def dip(app: AppContext, credit_card: float | None, paypal: float | None) -> None:
    """Dependency inversion: checkout depends on an abstract payment method."""
    from solidctl.services.checkout import CheckoutService

    defaults = app.settings.defaults
    payments = [
        ("credit_card", defaults.credit_card_amount if credit_card is None else credit_card),
        ("paypal", defaults.paypal_amount if paypal is None else paypal),
    ]
    app.emit(CheckoutService(app.settings, app.plugins).process(payments))


def _run_all(app: AppContext) -> dict[str, ServiceResult]:
    from solidctl.services.checkout import CheckoutService
    from solidctl.services.discount import DiscountService
    from solidctl.services.invoice import InvoiceService
    from solidctl.services.payment import PaymentService
    from solidctl.services.printer import PrinterService

    settings, plugins = app.settings, app.plugins
    return {
        "srp": InvoiceService(settings, plugins).describe(),
        "ocp": DiscountService(settings, plugins).apply(),
        "lsp": PaymentService(settings, plugins).process(),
        "isp": PrinterService(settings, plugins).run(),
        "dip": CheckoutService(settings, plugins).process(),
    }


@click.command("all", cls=SolidCommand, examples="  solidctl all\n  solidctl --json all")
@click.pass_obj
def all_cmd(app: AppContext) -> None:
    """Run every principle demo in order."""
    from solidctl.services.result import ServiceResult

    results = _run_all(app)
    failed = [r for r in results.values() if not r.ok]
    if failed:
        app.emit(failed[0])
        return

    lines: list[str] = []
    warnings: list[str] = []
    for key, result in results.items():
        lines.append(f"[{key.upper()}] {PRINCIPLES[key]}")
        lines.extend(result.data.get("lines", []))
        warnings.extend(result.warnings)

    app.emit(
        ServiceResult(
            ok=True,
            op="all",
            data={
                "demos": {key: r.model_dump(exclude={"warnings"}) for key, r in results.items()},
                "lines": lines,
            },
            warnings=warnings,
        )
    )
