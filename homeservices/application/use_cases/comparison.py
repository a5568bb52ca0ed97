from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from homeservices.application.utils.price_formatter import format_price
from homeservices.domain.entities.pricing import Pricing
from homeservices.domain.entities.service import Service

MAX_COMPARED = 3
MIN_TO_COMPARE = 2


@dataclass(frozen=True)
class ComparisonRow:
    service_id: str
    title: str
    category: str
    price: str
    duration: str
    features: tuple[str, ...]
    rating: float | None
    popular: bool


class ComparisonSet:
    """Up to three services picked for side-by-side display, in the order they were added."""

    def __init__(self, capacity: int = MAX_COMPARED) -> None:
        self._capacity = capacity
        self._services: list[Service] = []
        self._logger = logging.getLogger(__name__)

    def toggle(self, service: Service) -> bool:
        """
        Remove the service if present, add it if there is room.
        Returns False when the set is full and the service was not added.
        """
        for index, existing in enumerate(self._services):
            if existing.id == service.id:
                del self._services[index]
                return True
        if len(self._services) < self._capacity:
            self._services.append(service)
            return True
        self._logger.info("Comparison full, ignoring add", extra={"service": service.id})
        return False

    def clear(self) -> None:
        self._services = []

    @property
    def services(self) -> list[Service]:
        return list(self._services)

    @property
    def ids(self) -> list[str]:
        return [service.id for service in self._services]

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._services) >= self._capacity

    @property
    def can_compare(self) -> bool:
        return len(self._services) >= MIN_TO_COMPARE

    def can_add(self, service: Service) -> bool:
        return service in self or not self.is_full

    def comparison_rows(self, formatter: Callable[[Pricing | None], str] = format_price) -> list[ComparisonRow]:
        return [
            ComparisonRow(
                service_id=service.id,
                title=service.title,
                category=service.category,
                price=formatter(service.pricing),
                duration=service.duration.describe(),
                features=service.features,
                rating=service.rating.average if service.rating else None,
                popular=service.popular,
            )
            for service in self._services
        ]

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, item: object) -> bool:
        service_id = item.id if isinstance(item, Service) else item
        return any(service.id == service_id for service in self._services)
