"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, solidctl.toml only contains
overrides. Rates default to the constants owned by each variant.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from solidctl.domain.discounts import HolidayDiscount, LoyaltyDiscount
from solidctl.domain.invoice import Invoice

# --- solidctl.toml sections ---


class DiscountConfig(BaseModel):
    """[discount] section."""

    model_config = {"frozen": True}

    holiday_rate: float = Field(default=HolidayDiscount.RATE, ge=0)
    loyalty_rate: float = Field(default=LoyaltyDiscount.RATE, ge=0)


class InvoiceConfig(BaseModel):
    """[invoice] section."""

    model_config = {"frozen": True}

    tax_rate: float = Field(default=Invoice.TAX_RATE, ge=0)


class DefaultsConfig(BaseModel):
    """[defaults] section: amounts used when a command omits them."""

    model_config = {"frozen": True}

    invoice_id: int = 1
    invoice_amount: float = 1000
    discount_amount: float = 1000
    cash_amount: float = 500
    card_amount: float = 1000
    credit_card_amount: float = 100
    paypal_amount: float = 200


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".solidctl/plugins"
