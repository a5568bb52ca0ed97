from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from homeservices.domain.entities.pricing import Pricing


@dataclass(frozen=True)
class Rating:
    average: float
    count: int = 0


@dataclass(frozen=True)
class Duration:
    unit: str = "hours"
    estimated: float | None = None
    min: float | None = None
    max: float | None = None

    def describe(self) -> str:
        if self.min is not None and self.max is not None:
            return f"{_plain(self.min)}-{_plain(self.max)} {self.unit}"
        if self.estimated is not None:
            return f"{_plain(self.estimated)} {self.unit}"
        return ""


@dataclass(frozen=True)
class Service:
    id: str
    title: str
    description: str = ""
    category: str = ""
    image: str | None = None
    images: tuple[str, ...] = ()
    pricing: Pricing | None = None
    duration: Duration = field(default_factory=Duration)
    features: tuple[str, ...] = ()
    popular: bool = False
    trending: bool = False
    rating: Rating | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "Service":
        """Build a Service from the services API JSON shape (`_id` or `id`)."""
        service_id = payload.get("_id", payload.get("id"))
        title = payload.get("title")
        if service_id in (None, "") or not title:
            raise ValueError("service payload requires an id and a title")

        duration_payload = payload.get("duration") or {}
        rating_payload = payload.get("rating")
        rating = None
        if isinstance(rating_payload, Mapping) and rating_payload.get("average") is not None:
            rating = Rating(
                average=float(rating_payload["average"]),
                count=int(rating_payload.get("count") or 0),
            )

        return Service(
            id=str(service_id),
            title=str(title),
            description=str(payload.get("description") or ""),
            category=str(payload.get("category") or ""),
            image=payload.get("image"),
            images=tuple(str(i) for i in (payload.get("images") or []) if i),
            pricing=Pricing.from_payload(payload.get("pricing")),
            duration=Duration(
                unit=str(duration_payload.get("unit") or "hours"),
                estimated=duration_payload.get("estimated"),
                min=duration_payload.get("min"),
                max=duration_payload.get("max"),
            ),
            features=tuple(str(f) for f in (payload.get("features") or [])),
            popular=bool(payload.get("popular", False)),
            trending=bool(payload.get("trending", False)),
            rating=rating,
        )


def _plain(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
