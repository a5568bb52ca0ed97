"""
HTTP surface tests: FastAPI routes wired to an in-memory storefront.
"""

from __future__ import annotations

import dataclasses

import pytest
from fastapi.testclient import TestClient

from homeservices.application.exceptions import GatewayUnavailable
from homeservices.application.use_cases.storefront import StorefrontUseCase
from homeservices.infrastructure.gateway.mock_gateway import MockBookingGateway
from homeservices.infrastructure.knowledge.verticals import build_verticals
from homeservices.infrastructure.store.memory_store import MemoryViewStore
from homeservices.main import app
from homeservices.wiring.dependencies import get_storefront
from tests.fakes import FakeCatalogSource, service_payload

ON_DEMAND_FORM = {
    "name": "Asha Rao",
    "email": "asha@example.com",
    "phone": "9876543210",
    "address_line1": "12 MG Road",
    "city": "Bengaluru",
    "pincode": "560001",
    "scheduled_date": "2099-01-15",
    "time_slot": "evening",
}


@pytest.fixture
def views() -> MemoryViewStore:
    return MemoryViewStore()


@pytest.fixture
def client(views):
    verticals = build_verticals(currency_symbol="₹")
    storefront = StorefrontUseCase(
        verticals=verticals,
        catalog_source=FakeCatalogSource(error=GatewayUnavailable("offline")),
        gateway=MockBookingGateway({v.booking_service_type: v.booking_id_prefix for v in verticals.values()}),
        views=views,
    )
    app.dependency_overrides[get_storefront] = lambda: storefront
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_verticals_listing(client):
    body = client.get("/api/v1/verticals").json()

    assert [v["key"] for v in body] == ["construction", "renovation", "on_demand", "on_demand_detail"]
    assert body[0]["categories"][0] == "All"
    assert body[0]["supports_tracking"] is False
    assert body[2]["supports_tracking"] is True


def test_catalog_falls_back_and_filters(client):
    everything = client.get("/api/v1/verticals/construction/services").json()
    office = client.get("/api/v1/verticals/construction/services", params={"category": "Office"}).json()

    assert everything["used_fallback"] is True
    assert len(everything["services"]) == 6
    assert {s["category"] for s in office["services"]} == {"Office"}
    prices = {s["id"]: s["price"] for s in everything["services"]}
    assert prices["3"] == "₹2.5L"


def test_unknown_vertical_and_service(client):
    assert client.get("/api/v1/verticals/gardening/services").status_code == 404
    assert client.get("/api/v1/verticals/on_demand/services/nope").status_code == 404
    assert client.get("/api/v1/verticals/on_demand/services/od-3").json()["title"] == "Home Deep Cleaning"


def test_comparison_caps_at_three(client):
    url = "/api/v1/verticals/on_demand/views/tab-1/comparison"
    for service_id in ("od-1", "od-2", "od-3"):
        assert client.post(f"{url}/toggle", json={"service_id": service_id}).json()["changed"] is True

    full = client.post(f"{url}/toggle", json={"service_id": "od-4"}).json()

    assert full["changed"] is False
    assert full["service_ids"] == ["od-1", "od-2", "od-3"]
    assert full["is_full"] is True
    assert len(full["rows"]) == 3

    cleared = client.delete(url).json()
    assert cleared["service_ids"] == []


def test_booking_flow_and_tracking(client):
    base = "/api/v1/verticals/on_demand/views/tab-2"

    selected = client.post(f"{base}/booking/select", json={"service_id": "od-1"}).json()
    assert selected["phase"] == "service_selected"

    bad = client.patch(f"{base}/booking/draft", json={**ON_DEMAND_FORM, "phone": "12345"})
    assert bad.status_code == 200
    rejected = client.post(f"{base}/booking/submit")
    assert rejected.status_code == 422
    assert "phone" in rejected.json()["detail"]["errors"]

    client.patch(f"{base}/booking/draft", json={"phone": "9876543210", "requirements": {"special_instructions": "Gate 2"}})
    submitted = client.post(f"{base}/booking/submit")
    assert submitted.status_code == 200
    assert submitted.json() == {"booking_id": "OD-BK-000001", "status": "pending", "is_mock": False}

    state = client.get(f"{base}/booking").json()
    assert state["phase"] == "succeeded"
    assert state["draft"]["name"] == ""

    tracked = client.post(f"{base}/track", json={"booking_id": "OD-BK-000001", "phone": "9876543210"})
    assert tracked.status_code == 200
    assert tracked.json()["status"] == "pending"
    assert tracked.json()["details"]["serviceDetails"] == {"specialInstructions": "Gate 2"}

    missing = client.post(f"{base}/track", json={"booking_id": "OD-BK-000001", "phone": "9000000000"})
    assert missing.status_code == 404

    assert client.post(f"{base}/booking/acknowledge").json()["phase"] == "idle"


def test_tracking_not_offered_for_quote_verticals(client):
    response = client.post(
        "/api/v1/verticals/construction/views/tab-3/track",
        json={"booking_id": "CON-1", "phone": "9876543210"},
    )

    assert response.status_code == 404


def test_login_required_vertical_returns_401(views):
    verticals = build_verticals(currency_symbol="₹")
    guarded = {**verticals, "on_demand": _requiring_identity(verticals["on_demand"])}
    storefront = StorefrontUseCase(
        verticals=guarded,
        catalog_source=FakeCatalogSource(error=GatewayUnavailable("offline")),
        gateway=MockBookingGateway(),
        views=views,
    )
    app.dependency_overrides[get_storefront] = lambda: storefront
    try:
        client = TestClient(app)
        base = "/api/v1/verticals/on_demand/views"
        anonymous = client.post(f"{base}/anon/booking/select", json={"service_id": "od-1"})
        signed_in = client.post(
            f"{base}/member/booking/select",
            json={"service_id": "od-1"},
            headers={"Authorization": "Bearer tok", "X-User-Id": "u-1", "X-User-Name": "Asha"},
        )
    finally:
        app.dependency_overrides.clear()

    assert anonymous.status_code == 401
    assert signed_in.status_code == 200
    assert signed_in.json()["draft"]["name"] == "Asha"


def test_closing_view_cancels_its_work(client, views):
    client.post("/api/v1/verticals/on_demand/views/tab-4/comparison/toggle", json={"service_id": "od-1"})
    state = views.get("tab-4")

    response = client.delete("/api/v1/verticals/on_demand/views/tab-4")

    assert response.status_code == 204
    assert state.lifetime.cancelled
    assert views.get("tab-4") is None


def test_switching_vertical_reopens_the_view(client, views):
    client.get("/api/v1/verticals/on_demand/views/tab-5/booking")
    first = views.get("tab-5")

    client.get("/api/v1/verticals/renovation/views/tab-5/booking")

    assert first.lifetime.cancelled
    assert views.get("tab-5").vertical.key == "renovation"


def test_view_store_evicts_oldest_view():
    store = MemoryViewStore(view_limit=1)
    verticals = build_verticals(currency_symbol="₹")
    storefront = StorefrontUseCase(
        verticals=verticals,
        catalog_source=FakeCatalogSource(error=GatewayUnavailable("offline")),
        gateway=MockBookingGateway(),
        views=store,
    )
    first = storefront.open_view("a", "on_demand")

    storefront.open_view("b", "on_demand")

    assert len(store) == 1
    assert store.get("a") is None
    assert first.lifetime.cancelled


def _requiring_identity(vertical):
    return dataclasses.replace(vertical, requires_identity=True)


MEMBER_HEADERS = {
    "Authorization": "Bearer tok",
    "X-User-Id": "u-1",
    "X-User-Name": "Ravi",
    "X-User-Email": "ravi@example.com",
    "X-User-Phone": "9000000000",
}


def test_selection_uses_the_callers_current_identity(client):
    base = "/api/v1/verticals/on_demand/views/tab-9"
    client.get(f"{base}/comparison")

    selected = client.post(f"{base}/booking/select", json={"service_id": "od-1"}, headers=MEMBER_HEADERS)

    assert selected.status_code == 200
    assert selected.json()["draft"]["name"] == "Ravi"
    assert selected.json()["draft"]["phone"] == "9000000000"


def test_service_page_booking_for_signed_in_users(client):
    base = "/api/v1/verticals/on_demand_detail/views/page-1"

    anonymous = client.post(f"{base}/booking/select", json={"service_id": "od-8"})
    assert anonymous.status_code == 401

    selected = client.post(f"{base}/booking/select", json={"service_id": "od-8"}, headers=MEMBER_HEADERS)
    assert selected.status_code == 200
    assert selected.json()["draft"]["email"] == "ravi@example.com"

    client.patch(f"{base}/booking/draft", json={k: v for k, v in ON_DEMAND_FORM.items() if k not in ("name", "email", "phone")})
    submitted = client.post(f"{base}/booking/submit")
    assert submitted.status_code == 200
    assert submitted.json()["booking_id"] == "OD-BK-000001"

    tracked = client.post(f"{base}/track", json={"booking_id": "OD-BK-000001", "phone": "9000000000"}).json()
    assert tracked["details"]["serviceType"] == "on_demand"
    assert tracked["details"]["pricing"] == {"serviceCharge": 1200, "tax": 216.0, "total": 1416.0}
    assert tracked["details"]["customer"]["userId"] == "u-1"


def test_service_detail_is_a_single_backend_call(views):
    source = FakeCatalogSource(detail={"success": True, "data": service_payload("z")})
    storefront = StorefrontUseCase(
        verticals=build_verticals(currency_symbol="₹"),
        catalog_source=source,
        gateway=MockBookingGateway(),
        views=views,
    )
    app.dependency_overrides[get_storefront] = lambda: storefront
    try:
        response = TestClient(app).get("/api/v1/verticals/on_demand/services/z")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json()["id"] == "z"
    assert source.calls == ["/services/on_demand/z"]


def test_concurrent_opens_share_one_view(views):
    source = FakeCatalogSource(error=GatewayUnavailable("offline"))
    storefront = StorefrontUseCase(
        verticals=build_verticals(currency_symbol="₹"),
        catalog_source=source,
        gateway=MockBookingGateway(),
        views=views,
    )
    opened = []

    def open_same_view_midway():
        source.on_call = None
        opened.append(storefront.open_view("tab-7", "on_demand"))

    source.on_call = open_same_view_midway
    state = storefront.open_view("tab-7", "on_demand")

    assert state is opened[0]
    assert views.get("tab-7") is state
    assert len(views) == 1
