from __future__ import annotations

from homeservices.core.config import settings
from homeservices.domain.entities.vertical import FieldSchema, VerticalConfig
from homeservices.infrastructure.knowledge.fallback_catalog import (
    CONSTRUCTION_SERVICES,
    ON_DEMAND_SERVICES,
    RENOVATION_SERVICES,
)

PROPERTY_TYPES = ("Residential", "Commercial", "Industrial")
DESIGN_STYLES = (
    "Modern",
    "Contemporary",
    "Traditional",
    "Minimalist",
    "Scandinavian",
    "Industrial",
    "Bohemian",
    "Luxury",
)


def build_verticals(currency_symbol: str | None = None) -> dict[str, VerticalConfig]:
    currency = currency_symbol or settings.CURRENCY_SYMBOL

    construction = VerticalConfig.build(
        "construction",
        "Construction",
        categories=("Residential", "Commercial", "Office", "Hospitality", "Full Home"),
        fallback_services=CONSTRUCTION_SERVICES,
        booking_id_prefix="CON",
        track_path=None,
        field_schema=FieldSchema(
            required=("name", "email", "phone", "address_line1", "city", "property_type"),
            requirement_fields=("property_type", "area", "rooms", "budget", "preferred_style", "description"),
            choices={"property_type": PROPERTY_TYPES, "preferred_style": DESIGN_STYLES},
            numeric_fields=("area",),
        ),
        scaled_pricing=True,
        currency_symbol=currency,
        offline_fallback=True,
    )

    renovation = VerticalConfig.build(
        "renovation",
        "Renovation",
        categories=(
            "Kitchen Renovation",
            "Bathroom Renovation",
            "Living Room Renovation",
            "Bedroom Renovation",
            "Full Home Renovation",
            "Office Renovation",
            "Exterior Renovation",
            "Other",
        ),
        fallback_services=RENOVATION_SERVICES,
        booking_id_prefix="REN",
        track_path=None,
        field_schema=FieldSchema(
            required=("name", "email", "phone", "address_line1", "city", "pincode", "budget"),
            requirement_fields=("property_type", "budget", "description"),
            choices={"property_type": PROPERTY_TYPES},
        ),
        scaled_pricing=True,
        currency_symbol=currency,
        offline_fallback=True,
    )

    on_demand_categories = (
        "Plumbing",
        "Electrical",
        "Cleaning",
        "AC Service",
        "Pest Control",
        "Appliance Repair",
        "Salon & Beauty",
        "Painting",
    )
    on_demand_form = FieldSchema(
        required=(
            "name",
            "email",
            "phone",
            "address_line1",
            "city",
            "pincode",
            "scheduled_date",
            "time_slot",
        ),
        requirement_fields=("special_instructions",),
    )

    on_demand = VerticalConfig.build(
        "on_demand",
        "On-Demand Services",
        categories=on_demand_categories,
        fallback_services=ON_DEMAND_SERVICES,
        booking_id_prefix="OD",
        field_schema=on_demand_form,
        currency_symbol=currency,
        tax_rate=0.18,
    )

    # Booking from a service's own page: signed-in users only, per-unit jobs billed at 100 units.
    on_demand_detail = VerticalConfig.build(
        "on_demand_detail",
        "On-Demand Service Booking",
        categories=on_demand_categories,
        fallback_services=ON_DEMAND_SERVICES,
        booking_id_prefix="OD",
        field_schema=on_demand_form,
        services_path="/services/on_demand",
        service_type="on_demand",
        currency_symbol=currency,
        tax_rate=0.18,
        requires_identity=True,
        per_unit_quantity=100,
    )

    return {v.key: v for v in (construction, renovation, on_demand, on_demand_detail)}
