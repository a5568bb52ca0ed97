from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from homeservices.application.use_cases.booking_session import BookingSession
from homeservices.application.use_cases.comparison import ComparisonSet
from homeservices.application.utils.price_formatter import format_price_for
from homeservices.domain.entities.booking import BookingResult
from homeservices.domain.entities.service import Service
from homeservices.domain.entities.vertical import VerticalConfig


class VerticalSchema(BaseModel):
    key: str
    display_name: str
    categories: list[str]
    supports_tracking: bool


class RatingSchema(BaseModel):
    average: float
    count: int


class ServiceSchema(BaseModel):
    id: str
    title: str
    description: str
    category: str
    image: str | None = None
    images: list[str] = Field(default_factory=list)
    price: str
    pricing: dict[str, Any] | None = None
    duration: str
    features: list[str] = Field(default_factory=list)
    popular: bool = False
    trending: bool = False
    rating: RatingSchema | None = None

    @staticmethod
    def from_service(service: Service, vertical: VerticalConfig) -> "ServiceSchema":
        return ServiceSchema(
            id=service.id,
            title=service.title,
            description=service.description,
            category=service.category,
            image=service.image,
            images=list(service.images),
            price=format_price_for(vertical, service.pricing),
            pricing=service.pricing.to_payload() if service.pricing else None,
            duration=service.duration.describe(),
            features=list(service.features),
            popular=service.popular,
            trending=service.trending,
            rating=RatingSchema(average=service.rating.average, count=service.rating.count) if service.rating else None,
        )


class CatalogResponseSchema(BaseModel):
    vertical: str
    category: str
    categories: list[str]
    used_fallback: bool
    services: list[ServiceSchema]


class ServiceRefSchema(BaseModel):
    service_id: str


class ComparisonRowSchema(BaseModel):
    service_id: str
    title: str
    category: str
    price: str
    duration: str
    features: list[str]
    rating: float | None = None
    popular: bool = False


class ComparisonResponseSchema(BaseModel):
    service_ids: list[str]
    is_full: bool
    can_compare: bool
    changed: bool = True
    rows: list[ComparisonRowSchema] = Field(default_factory=list)

    @staticmethod
    def from_set(comparison: ComparisonSet, vertical: VerticalConfig, changed: bool = True) -> "ComparisonResponseSchema":
        return ComparisonResponseSchema(
            service_ids=comparison.ids,
            is_full=comparison.is_full,
            can_compare=comparison.can_compare,
            changed=changed,
            rows=[
                ComparisonRowSchema(
                    service_id=row.service_id,
                    title=row.title,
                    category=row.category,
                    price=row.price,
                    duration=row.duration,
                    features=list(row.features),
                    rating=row.rating,
                    popular=row.popular,
                )
                for row in comparison.comparison_rows(lambda pricing: format_price_for(vertical, pricing))
            ],
        )


class DraftUpdateSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    alternate_phone: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    scheduled_date: str | None = None
    time_slot: str | None = None
    requirements: dict[str, str] = Field(default_factory=dict)

    def to_values(self) -> dict[str, Any]:
        values = self.model_dump(exclude_none=True, exclude={"requirements"})
        values.update(self.requirements)
        return values


class BookingResultSchema(BaseModel):
    booking_id: str
    status: str
    is_mock: bool

    @staticmethod
    def from_result(result: BookingResult) -> "BookingResultSchema":
        return BookingResultSchema(booking_id=result.booking_id, status=result.status, is_mock=result.is_mock)


class BookingStateSchema(BaseModel):
    phase: str
    service_id: str | None = None
    draft: dict[str, Any]
    errors: dict[str, str] = Field(default_factory=dict)
    error: str | None = None
    can_submit: bool
    result: BookingResultSchema | None = None

    @staticmethod
    def from_session(session: BookingSession) -> "BookingStateSchema":
        return BookingStateSchema(
            phase=session.phase.value,
            service_id=session.service.id if session.service else None,
            draft=session.draft.snapshot(),
            errors=session.errors,
            error=session.error,
            can_submit=session.can_submit,
            result=BookingResultSchema.from_result(session.result) if session.result else None,
        )


class TrackRequestSchema(BaseModel):
    booking_id: str = ""
    phone: str = ""


class TrackResponseSchema(BaseModel):
    booking_id: str
    status: str
    details: dict[str, Any] = Field(default_factory=dict)

    @staticmethod
    def from_result(result: BookingResult) -> "TrackResponseSchema":
        return TrackResponseSchema(booking_id=result.booking_id, status=result.status, details=dict(result.details))
