"""Shared fixtures for the storefront test suite."""

from __future__ import annotations

from datetime import date

import pytest

from homeservices.application.exceptions import GatewayUnavailable
from homeservices.infrastructure.knowledge.verticals import build_verticals

TODAY = date(2026, 3, 10)


@pytest.fixture
def verticals():
    return build_verticals(currency_symbol="₹")


@pytest.fixture
def construction(verticals):
    return verticals["construction"]


@pytest.fixture
def renovation(verticals):
    return verticals["renovation"]


@pytest.fixture
def on_demand(verticals):
    return verticals["on_demand"]


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def unreachable() -> GatewayUnavailable:
    return GatewayUnavailable("connection refused")


@pytest.fixture
def on_demand_detail(verticals):
    return verticals["on_demand_detail"]
