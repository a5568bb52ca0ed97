from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CatalogSourcePort(ABC):
    @abstractmethod
    def fetch_services(self, path: str) -> dict[str, Any]:
        """GET the service list at path. Returns the raw JSON body; raises GatewayError on transport/HTTP failure."""
        raise NotImplementedError

    @abstractmethod
    def fetch_service(self, path: str, service_id: str) -> dict[str, Any]:
        """GET a single service. Returns the raw JSON body; raises GatewayError on transport/HTTP failure."""
        raise NotImplementedError
