from __future__ import annotations

from typing import Iterable

from homeservices.domain.entities.service import Service

ALL_CATEGORIES = "All"


def filter_services(services: Iterable[Service], category: str | None) -> list[Service]:
    """Keep services whose category matches exactly; "All" (or no category) keeps everything in order."""
    if not category or category == ALL_CATEGORIES:
        return list(services)
    return [service for service in services if service.category == category]
