from __future__ import annotations

import logging
from typing import Any

from homeservices.application.exceptions import DataUnavailable, GatewayError, GatewayUnavailable
from homeservices.application.ports.catalog_source import CatalogSourcePort
from homeservices.application.utils.category_filter import filter_services
from homeservices.application.utils.view_lifetime import ViewLifetime
from homeservices.domain.entities.service import Service
from homeservices.domain.entities.vertical import VerticalConfig


class CatalogStore:
    """Service list for one vertical, fetched once per view with the bundled dataset as fallback."""

    def __init__(
        self,
        vertical: VerticalConfig,
        source: CatalogSourcePort,
        lifetime: ViewLifetime | None = None,
    ) -> None:
        self._vertical = vertical
        self._source = source
        self._lifetime = lifetime or ViewLifetime(f"catalog:{vertical.key}")
        self._services: list[Service] = []
        self._loading = False
        self._used_fallback = False
        self._logger = logging.getLogger(__name__)

    @property
    def vertical(self) -> VerticalConfig:
        return self._vertical

    @property
    def services(self) -> list[Service]:
        return list(self._services)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def used_fallback(self) -> bool:
        return self._used_fallback

    def categories(self) -> list[str]:
        return list(self._vertical.categories)

    def load(self, endpoint: str | None = None) -> list[Service]:
        """
        Fetch the catalog once. Any transport failure, HTTP error or unusable
        payload is absorbed and the vertical's bundled services are served.
        """
        path = endpoint or self._vertical.services_path
        self._loading = True
        try:
            try:
                services = self._parse_list(self._source.fetch_services(path))
                used_fallback = False
            except (GatewayError, DataUnavailable) as e:
                self._logger.warning(
                    "Catalog unavailable, serving bundled services",
                    extra={"vertical": self._vertical.key, "reason": str(e)},
                )
                services = list(self._vertical.fallback_services)
                used_fallback = True
        finally:
            self._loading = False

        def apply() -> list[Service]:
            self._services = services
            self._used_fallback = used_fallback
            return self.services

        return self._lifetime.guard(apply, self.services, reason="catalog load")

    def get(self, service_id: str) -> Service | None:
        for service in self._services:
            if service.id == service_id:
                return service
        return None

    def filtered(self, category: str | None) -> list[Service]:
        return filter_services(self._services, category)

    def load_detail(self, service_id: str) -> Service | None:
        """
        Fetch one service. None means the caller should go back to the catalog:
        the backend said success=false or returned something unusable.
        When the backend is unreachable the bundled service with that id is used.
        """
        try:
            body = self._source.fetch_service(self._vertical.services_path, service_id)
            service = self._parse_single(body)
        except GatewayUnavailable as e:
            self._logger.warning(
                "Service detail unavailable, trying bundled services",
                extra={"vertical": self._vertical.key, "service": service_id, "reason": str(e)},
            )
            service = self._vertical.fallback_by_id(service_id)
        except (GatewayError, DataUnavailable) as e:
            self._logger.info(
                "Service not found",
                extra={"vertical": self._vertical.key, "service": service_id, "reason": str(e)},
            )
            service = None

        return self._lifetime.guard(lambda: service, None, reason="service detail")

    def _parse_list(self, body: Any) -> list[Service]:
        if not isinstance(body, dict) or body.get("success") is not True:
            raise DataUnavailable("catalog response missing success flag")
        data = body.get("data")
        if not isinstance(data, list) or not data:
            raise DataUnavailable("catalog response has no services")

        services: list[Service] = []
        for item in data:
            try:
                services.append(Service.from_payload(item))
            except (AttributeError, TypeError, ValueError) as e:
                self._logger.warning(
                    "Skipping malformed service",
                    extra={"vertical": self._vertical.key, "reason": str(e)},
                )
        if not services:
            raise DataUnavailable("catalog response has no usable services")
        return services

    def _parse_single(self, body: Any) -> Service:
        if not isinstance(body, dict) or body.get("success") is not True:
            raise DataUnavailable("service response missing success flag")
        data = body.get("data")
        if not isinstance(data, dict):
            raise DataUnavailable("service response has no data")
        try:
            return Service.from_payload(data)
        except (TypeError, ValueError) as e:
            raise DataUnavailable(f"malformed service: {e}") from e
