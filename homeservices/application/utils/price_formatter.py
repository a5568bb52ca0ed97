from __future__ import annotations

from homeservices.domain.entities.pricing import Pricing, PricingType
from homeservices.domain.entities.vertical import VerticalConfig

CONTACT_FOR_PRICING = "Contact for pricing"
LAKH = 100_000


def format_price(pricing: Pricing | None, *, scaled: bool = False, currency: str = "₹") -> str:
    """
    Render a pricing descriptor for display.
    `scaled` switches fixed prices to lakh notation (₹2.5L); custom ranges
    are always shown in lakhs. Never raises.
    """
    if pricing is None:
        return CONTACT_FOR_PRICING

    if pricing.type == PricingType.FIXED and pricing.base_price is not None:
        if scaled:
            return f"{currency}{_lakhs(pricing.base_price)}"
        return f"{currency}{_amount(pricing.base_price)}"
    if pricing.type == PricingType.PER_SQFT and pricing.base_price is not None:
        return f"{currency}{_amount(pricing.base_price)}/sq.ft"
    if pricing.type == PricingType.HOURLY and pricing.hourly_rate is not None:
        return f"{currency}{_amount(pricing.hourly_rate)}/hr"
    if pricing.type == PricingType.PER_UNIT and pricing.unit_price is not None and pricing.unit_name:
        return f"{currency}{_amount(pricing.unit_price)}/{pricing.unit_name}"
    if pricing.type == PricingType.CUSTOM and pricing.min_price is not None and pricing.max_price is not None:
        return f"{currency}{_lakhs(pricing.min_price)} - {currency}{_lakhs(pricing.max_price)}"

    return CONTACT_FOR_PRICING


def format_price_for(vertical: VerticalConfig, pricing: Pricing | None) -> str:
    return format_price(pricing, scaled=vertical.scaled_pricing, currency=vertical.currency_symbol)


def estimate_charge(pricing: Pricing | None, vertical: VerticalConfig) -> tuple[float, float | None, float]:
    """Return (service_charge, tax, total) sent with a booking request."""
    charge = 0.0
    if pricing is not None:
        if pricing.type == PricingType.HOURLY:
            charge = (pricing.hourly_rate or 0) * max(pricing.min_hours or 1, 1)
        elif pricing.type == PricingType.PER_UNIT:
            charge = (pricing.unit_price or 0) * vertical.per_unit_quantity
        elif pricing.type == PricingType.CUSTOM:
            charge = pricing.min_price or 0
        else:
            charge = pricing.base_price or 0

    if vertical.tax_rate is None:
        return charge, None, charge
    tax = round(charge * vertical.tax_rate, 2)
    return charge, tax, round(charge + tax, 2)


def _amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _lakhs(value: float) -> str:
    return f"{value / LAKH:.1f}L"
