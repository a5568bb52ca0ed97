"""
Tests for catalog loading, category filtering and the bundled fallback.
"""

from __future__ import annotations

from homeservices.application.exceptions import GatewayRejected, GatewayUnavailable
from homeservices.application.use_cases.catalog import CatalogStore
from homeservices.application.utils.category_filter import filter_services
from homeservices.application.utils.view_lifetime import ViewLifetime
from homeservices.domain.entities.service import Service
from tests.fakes import FakeCatalogSource, service_payload


def _services(*pairs: tuple[str, str]) -> list[Service]:
    return [Service.from_payload(service_payload(sid, category)) for sid, category in pairs]


def test_load_uses_remote_services(on_demand):
    source = FakeCatalogSource(body={"success": True, "data": [service_payload("a"), service_payload("b")]})
    store = CatalogStore(on_demand, source)

    services = store.load()

    assert [s.id for s in services] == ["a", "b"]
    assert source.calls == ["/services/on_demand"]
    assert store.used_fallback is False
    assert store.loading is False


def test_fetch_failure_serves_bundled_dataset_exactly(on_demand):
    store = CatalogStore(on_demand, FakeCatalogSource(error=GatewayUnavailable("timeout")))

    services = store.load()

    assert {s.id for s in services} == {s.id for s in on_demand.fallback_services}
    assert store.used_fallback is True
    assert store.loading is False


def test_http_error_and_bad_payloads_fall_back(construction):
    bodies = [
        {"data": [service_payload("x")]},
        {"success": False, "message": "db down"},
        {"success": True, "data": []},
        {"success": True, "data": "nope"},
        {"success": True, "data": [{"title": "no id"}]},
        ["not", "an", "object"],
    ]
    fallback_ids = [s.id for s in construction.fallback_services]

    for body in bodies:
        store = CatalogStore(construction, FakeCatalogSource(body=body))
        assert [s.id for s in store.load()] == fallback_ids

    rejected = CatalogStore(construction, FakeCatalogSource(error=GatewayRejected("not found", 404)))
    assert [s.id for s in rejected.load()] == fallback_ids


def test_malformed_items_are_skipped_when_others_parse(on_demand):
    body = {"success": True, "data": [service_payload("a"), {"title": "broken"}, service_payload("c")]}

    services = CatalogStore(on_demand, FakeCatalogSource(body=body)).load()

    assert [s.id for s in services] == ["a", "c"]


def test_loading_flag_is_set_during_fetch(on_demand):
    source = FakeCatalogSource(error=GatewayUnavailable("down"))
    store = CatalogStore(on_demand, source)
    seen = []
    source.on_call = lambda: seen.append(store.loading)

    store.load()

    assert seen == [True]
    assert store.loading is False


def test_completion_after_view_closed_is_dropped(on_demand):
    lifetime = ViewLifetime("page-1")
    source = FakeCatalogSource(body={"success": True, "data": [service_payload("a")]})
    source.on_call = lifetime.cancel
    store = CatalogStore(on_demand, source, lifetime=lifetime)

    assert store.load() == []
    assert store.services == []
    assert store.loading is False


def test_load_detail(on_demand):
    found = CatalogStore(
        on_demand, FakeCatalogSource(detail={"success": True, "data": service_payload("z", title="Zed")})
    )
    missing = CatalogStore(on_demand, FakeCatalogSource(detail={"success": False}))
    offline = CatalogStore(on_demand, FakeCatalogSource(error=GatewayUnavailable("down")))

    assert found.load_detail("z").title == "Zed"
    assert missing.load_detail("z") is None
    assert offline.load_detail("od-3").title == "Home Deep Cleaning"
    assert offline.load_detail("unknown") is None


def test_get_and_filtered_read_loaded_services(on_demand):
    body = {"success": True, "data": [service_payload("a", "Plumbing"), service_payload("b", "Cleaning")]}
    store = CatalogStore(on_demand, FakeCatalogSource(body=body))
    store.load()

    assert store.get("b").category == "Cleaning"
    assert store.get("nope") is None
    assert [s.id for s in store.filtered("Cleaning")] == ["b"]
    assert store.categories()[0] == "All"


def test_filter_all_is_identity():
    services = _services(("1", "Plumbing"), ("2", "Cleaning"), ("3", "Plumbing"))

    assert filter_services(services, "All") == services
    assert filter_services(services, None) == services
    assert filter_services([], "All") == []


def test_filter_by_category_keeps_order_and_exact_matches():
    services = _services(("1", "Plumbing"), ("2", "Cleaning"), ("3", "Plumbing"), ("4", "plumbing"))

    result = filter_services(services, "Plumbing")

    assert [s.id for s in result] == ["1", "3"]
    assert all(s.category == "Plumbing" for s in result)
    assert filter_services(services, "Painting") == []
