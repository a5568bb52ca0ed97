from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class PricingType(str, Enum):
    FIXED = "fixed"
    PER_SQFT = "per_sqft"
    HOURLY = "hourly"
    PER_UNIT = "per_unit"
    CUSTOM = "custom"


# Amount keys each variant must carry in the REST payload.
_REQUIRED_KEYS: dict[PricingType, tuple[str, ...]] = {
    PricingType.FIXED: ("basePrice",),
    PricingType.PER_SQFT: ("basePrice",),
    PricingType.HOURLY: ("hourlyRate",),
    PricingType.PER_UNIT: ("unitPrice", "unitName"),
    PricingType.CUSTOM: ("minPrice", "maxPrice"),
}


@dataclass(frozen=True)
class Pricing:
    type: PricingType
    base_price: float | None = None
    hourly_rate: float | None = None
    min_hours: float | None = None
    unit_price: float | None = None
    unit_name: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any] | None) -> "Pricing | None":
        """
        Parse the tagged pricing descriptor used by the services API.
        Returns None for a missing descriptor, an unknown type, or a variant
        whose amounts are absent or non-numeric.
        """
        if not isinstance(payload, Mapping):
            return None
        try:
            pricing_type = PricingType(str(payload.get("type", "")).strip().lower())
        except ValueError:
            return None

        for key in _REQUIRED_KEYS[pricing_type]:
            if payload.get(key) in (None, ""):
                return None

        try:
            if pricing_type in (PricingType.FIXED, PricingType.PER_SQFT):
                return Pricing(type=pricing_type, base_price=_number(payload["basePrice"]))
            if pricing_type == PricingType.HOURLY:
                min_hours = payload.get("minHours")
                return Pricing(
                    type=pricing_type,
                    hourly_rate=_number(payload["hourlyRate"]),
                    min_hours=_number(min_hours) if min_hours not in (None, "") else None,
                )
            if pricing_type == PricingType.PER_UNIT:
                return Pricing(
                    type=pricing_type,
                    unit_price=_number(payload["unitPrice"]),
                    unit_name=str(payload["unitName"]).strip(),
                )
            return Pricing(
                type=pricing_type,
                min_price=_number(payload["minPrice"]),
                max_price=_number(payload["maxPrice"]),
            )
        except (TypeError, ValueError):
            return None

    def to_payload(self) -> dict[str, Any]:
        if self.type in (PricingType.FIXED, PricingType.PER_SQFT):
            return {"type": self.type.value, "basePrice": self.base_price}
        if self.type == PricingType.HOURLY:
            return {"type": self.type.value, "hourlyRate": self.hourly_rate, "minHours": self.min_hours}
        if self.type == PricingType.PER_UNIT:
            return {"type": self.type.value, "unitPrice": self.unit_price, "unitName": self.unit_name}
        return {"type": self.type.value, "minPrice": self.min_price, "maxPrice": self.max_price}


def _number(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("boolean is not an amount")
    return float(value)
