"""
Tests for payload parsing, the booking draft record and client-side ids.
"""

from __future__ import annotations

import re

import pytest

from homeservices.application.utils.booking_ids import MockBookingIdFactory
from homeservices.domain.entities.booking import BookingDraft
from homeservices.domain.entities.pricing import Pricing, PricingType
from homeservices.domain.entities.service import Service


def test_pricing_from_payload_picks_the_tagged_variant():
    pricing = Pricing.from_payload({"type": "hourly", "hourlyRate": "299", "minHours": 2})

    assert pricing == Pricing(type=PricingType.HOURLY, hourly_rate=299.0, min_hours=2.0)
    assert pricing.to_payload() == {"type": "hourly", "hourlyRate": 299.0, "minHours": 2.0}


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {},
        {"type": "barter"},
        {"type": "fixed"},
        {"type": "per_unit", "unitPrice": 12},
        {"type": "fixed", "basePrice": "a lot"},
    ],
)
def test_pricing_from_payload_rejects_unusable_descriptors(payload):
    assert Pricing.from_payload(payload) is None


def test_service_from_payload_reads_api_shape():
    service = Service.from_payload(
        {
            "_id": "abc",
            "title": "Home Deep Cleaning",
            "category": "Cleaning",
            "pricing": {"type": "fixed", "basePrice": 2499},
            "features": ["Kitchen", "Bathroom"],
            "duration": {"estimated": 3, "unit": "hours"},
            "rating": {"average": 4.5, "count": 20},
            "popular": True,
        }
    )

    assert service.id == "abc"
    assert service.features == ("Kitchen", "Bathroom")
    assert service.duration.describe() == "3 hours"
    assert service.rating.average == 4.5
    assert service.popular is True
    assert service.trending is False


def test_service_from_payload_requires_id_and_title():
    with pytest.raises(ValueError):
        Service.from_payload({"title": "No id"})
    with pytest.raises(ValueError):
        Service.from_payload({"id": "1"})


def test_draft_update_routes_unknown_fields_to_requirements():
    draft = BookingDraft()
    draft.update(name="Asha", phone=9876543210, budget="5-10 Lakhs", requirements={"rooms": 3})

    assert draft.name == "Asha"
    assert draft.phone == "9876543210"
    assert draft.requirements == {"budget": "5-10 Lakhs", "rooms": "3"}
    assert draft.get("budget") == "5-10 Lakhs"
    assert draft.get("missing") == ""
    assert not draft.is_empty()
    assert BookingDraft().is_empty()


def test_mock_ids_are_prefixed_and_strictly_increasing():
    factory = MockBookingIdFactory("CON", clock=lambda: 1_700_000_000.0)

    first, second = factory(), factory()

    assert re.fullmatch(r"CON-\d+", first)
    assert first == "CON-1700000000000"
    assert second == "CON-1700000000001"
