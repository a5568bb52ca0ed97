from __future__ import annotations

from dataclasses import dataclass

from homeservices.application.use_cases.booking_session import BookingSession
from homeservices.application.use_cases.catalog import CatalogStore
from homeservices.application.use_cases.comparison import ComparisonSet
from homeservices.application.use_cases.tracking import TrackingLookup
from homeservices.application.utils.view_lifetime import ViewLifetime
from homeservices.domain.entities.vertical import VerticalConfig


@dataclass
class ViewState:
    """Everything one open catalog page owns. Comparison and booking never share state."""

    view_id: str
    vertical: VerticalConfig
    lifetime: ViewLifetime
    catalog: CatalogStore
    comparison: ComparisonSet
    booking: BookingSession
    tracking: TrackingLookup | None = None
