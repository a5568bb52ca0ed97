from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from homeservices.domain.entities.service import Service

DEFAULT_TIME_SLOTS: dict[str, tuple[str, str]] = {
    "morning": ("08:00", "12:00"),
    "afternoon": ("12:00", "16:00"),
    "evening": ("16:00", "20:00"),
}


@dataclass(frozen=True)
class FieldSchema:
    """Which draft fields a vertical's booking form asks for and requires."""

    required: tuple[str, ...] = ("name", "email", "phone")
    requirement_fields: tuple[str, ...] = ()
    choices: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    numeric_fields: tuple[str, ...] = ()
    phone_digits: int = 10
    pincode_digits: int = 6

    def is_required(self, name: str) -> bool:
        return name in self.required


@dataclass(frozen=True)
class VerticalConfig:
    key: str
    display_name: str
    services_path: str
    booking_path: str
    track_path: str | None
    categories: tuple[str, ...]
    fallback_services: tuple[Service, ...]
    field_schema: FieldSchema
    booking_id_prefix: str
    scaled_pricing: bool = False
    currency_symbol: str = "₹"
    offline_fallback: bool = False
    requires_identity: bool = False
    tax_rate: float | None = None
    per_unit_quantity: int = 1
    time_slots: Mapping[str, tuple[str, str]] = field(default_factory=lambda: dict(DEFAULT_TIME_SLOTS))
    default_time_slot: tuple[str, str] = ("09:00", "17:00")
    # backend serviceType when it differs from key
    service_type: str | None = None

    @staticmethod
    def build(
        key: str,
        display_name: str,
        *,
        categories: Iterable[str],
        fallback_services: Iterable[Mapping[str, Any]],
        booking_id_prefix: str,
        field_schema: FieldSchema | None = None,
        services_path: str | None = None,
        booking_path: str = "/bookings",
        track_path: str | None = "/bookings/track",
        **options: Any,
    ) -> "VerticalConfig":
        """
        Assemble a vertical from raw pieces: fallback services are given in
        the API payload shape and parsed here, "All" is always the first
        category and paths default to /services/<key>.
        """
        category_list = [c for c in categories if c != "All"]
        return VerticalConfig(
            key=key,
            display_name=display_name,
            services_path=services_path or f"/services/{key}",
            booking_path=booking_path,
            track_path=track_path,
            categories=("All", *category_list),
            fallback_services=tuple(Service.from_payload(p) for p in fallback_services),
            field_schema=field_schema or FieldSchema(),
            booking_id_prefix=booking_id_prefix,
            **options,
        )

    def fallback_by_id(self, service_id: str) -> Service | None:
        for service in self.fallback_services:
            if service.id == service_id:
                return service
        return None

    @property
    def booking_service_type(self) -> str:
        return self.service_type or self.key

    @property
    def supports_tracking(self) -> bool:
        return self.track_path is not None
