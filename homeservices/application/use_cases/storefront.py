from __future__ import annotations

import logging
import threading

from homeservices.application.dto.view_state import ViewState
from homeservices.application.ports.booking_gateway import BookingGatewayPort
from homeservices.application.ports.catalog_source import CatalogSourcePort
from homeservices.application.ports.identity import IdentityProviderPort
from homeservices.application.ports.view_store import ViewStorePort
from homeservices.application.use_cases.booking_session import BookingSession
from homeservices.application.use_cases.catalog import CatalogStore
from homeservices.application.use_cases.comparison import ComparisonSet
from homeservices.application.use_cases.tracking import TrackingLookup
from homeservices.application.utils.view_lifetime import ViewLifetime
from homeservices.domain.entities.service import Service
from homeservices.domain.entities.vertical import VerticalConfig


class UnknownVertical(LookupError):
    pass


class StorefrontUseCase:
    """Builds the per-view engine (catalog, comparison, booking, tracking) for a vertical."""

    def __init__(
        self,
        verticals: dict[str, VerticalConfig],
        catalog_source: CatalogSourcePort,
        gateway: BookingGatewayPort,
        views: ViewStorePort,
    ) -> None:
        self._verticals = verticals
        self._catalog_source = catalog_source
        self._gateway = gateway
        self._views = views
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def verticals(self) -> list[VerticalConfig]:
        return list(self._verticals.values())

    def vertical(self, key: str) -> VerticalConfig:
        vertical = self._verticals.get(key)
        if vertical is None:
            raise UnknownVertical(f"Unknown vertical '{key}'")
        return vertical

    def catalog(self, vertical_key: str) -> CatalogStore:
        """A catalog store for the vertical that has not fetched anything yet."""
        return CatalogStore(self.vertical(vertical_key), self._catalog_source)

    def load_catalog(self, vertical_key: str) -> CatalogStore:
        catalog = self.catalog(vertical_key)
        catalog.load()
        return catalog

    def open_view(
        self,
        view_id: str,
        vertical_key: str,
        identity_provider: IdentityProviderPort | None = None,
    ) -> ViewState:
        """Return the view's state, creating it (and loading its catalog once) on first use."""
        vertical = self.vertical(vertical_key)
        existing = self._views.get(view_id)
        if existing is not None and existing.vertical.key == vertical.key:
            return existing

        state = self._build_view(view_id, vertical, identity_provider)
        with self._lock:
            existing = self._views.get(view_id)
            if existing is not None and existing.vertical.key == vertical.key:
                # another request opened the same view while this one was loading
                state.lifetime.cancel()
                return existing
            if existing is not None:
                self._views.close(view_id)
            self._views.put(state)
        self._logger.info(
            "View opened",
            extra={"view": view_id, "vertical": vertical.key, "fallback": state.catalog.used_fallback},
        )
        return state

    def select_service(
        self,
        state: ViewState,
        service_id: str,
        identity_provider: IdentityProviderPort | None = None,
    ) -> Service | None:
        """Start a booking in the view using the caller's identity; None when the service is not in its catalog."""
        service = state.catalog.get(service_id)
        if service is None:
            return None
        state.booking.select_service(service, identity_provider=identity_provider)
        return service

    def get_view(self, view_id: str) -> ViewState | None:
        return self._views.get(view_id)

    def close_view(self, view_id: str) -> bool:
        return self._views.close(view_id)

    def _build_view(
        self,
        view_id: str,
        vertical: VerticalConfig,
        identity_provider: IdentityProviderPort | None,
    ) -> ViewState:
        lifetime = ViewLifetime(view_id)
        catalog = CatalogStore(vertical, self._catalog_source, lifetime=lifetime)
        catalog.load()
        return ViewState(
            view_id=view_id,
            vertical=vertical,
            lifetime=lifetime,
            catalog=catalog,
            comparison=ComparisonSet(),
            booking=BookingSession(
                vertical,
                self._gateway,
                identity_provider=identity_provider,
                lifetime=lifetime,
            ),
            tracking=(
                TrackingLookup(self._gateway, track_path=vertical.track_path, lifetime=lifetime)
                if vertical.track_path
                else None
            ),
        )
