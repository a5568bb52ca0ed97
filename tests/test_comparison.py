"""
Tests for the bounded side-by-side comparison set.
"""

from __future__ import annotations

import random

from homeservices.application.use_cases.comparison import ComparisonSet
from homeservices.application.utils.price_formatter import format_price
from homeservices.domain.entities.service import Service
from tests.fakes import service_payload


def _service(service_id: str) -> Service:
    return Service.from_payload(service_payload(service_id))


def test_fourth_service_is_rejected_not_evicting():
    a, b, c, d = (_service(x) for x in "ABCD")
    comparison = ComparisonSet()

    results = [comparison.toggle(s) for s in (a, b, c, d)]

    assert results == [True, True, True, False]
    assert comparison.ids == ["A", "B", "C"]
    assert comparison.is_full
    assert d not in comparison


def test_toggle_twice_restores_previous_state():
    a, b = _service("A"), _service("B")
    comparison = ComparisonSet()
    comparison.toggle(a)
    before = comparison.ids

    comparison.toggle(b)
    comparison.toggle(b)

    assert comparison.ids == before


def test_removing_from_full_set_frees_a_slot():
    a, b, c, d = (_service(x) for x in "ABCD")
    comparison = ComparisonSet()
    for s in (a, b, c):
        comparison.toggle(s)

    comparison.toggle(b)
    comparison.toggle(d)

    assert comparison.ids == ["A", "C", "D"]


def test_size_never_exceeds_capacity():
    pool = [_service(str(i)) for i in range(8)]
    comparison = ComparisonSet()
    rng = random.Random(7)

    for _ in range(500):
        comparison.toggle(rng.choice(pool))
        assert len(comparison) <= 3


def test_compare_needs_two_and_clear_empties():
    comparison = ComparisonSet()
    comparison.toggle(_service("A"))
    assert not comparison.can_compare

    comparison.toggle(_service("B"))
    assert comparison.can_compare

    comparison.clear()
    assert len(comparison) == 0
    assert comparison.ids == []


def test_can_add_reflects_capacity():
    a, b, c, d = (_service(x) for x in "ABCD")
    comparison = ComparisonSet()
    for s in (a, b, c):
        comparison.toggle(s)

    assert comparison.can_add(a)
    assert not comparison.can_add(d)


def test_comparison_rows_are_ordered_and_formatted():
    comparison = ComparisonSet()
    comparison.toggle(_service("B"))
    comparison.toggle(_service("A"))

    rows = comparison.comparison_rows(format_price)

    assert [r.service_id for r in rows] == ["B", "A"]
    assert rows[0].price == "₹499"
    assert rows[0].duration == "1 hours"
    assert rows[0].features == ("One", "Two")
