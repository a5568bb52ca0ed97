from functools import lru_cache
import logging

from homeservices.core.config import settings
from homeservices.application.ports.booking_gateway import BookingGatewayPort
from homeservices.application.ports.catalog_source import CatalogSourcePort
from homeservices.application.use_cases.storefront import StorefrontUseCase
from homeservices.domain.entities.vertical import VerticalConfig
from homeservices.infrastructure.gateway.api_client import ApiClient
from homeservices.infrastructure.gateway.http_gateway import HttpBookingGateway, HttpCatalogSource
from homeservices.infrastructure.gateway.mock_gateway import MockBookingGateway
from homeservices.infrastructure.knowledge.verticals import build_verticals
from homeservices.infrastructure.store.memory_store import MemoryViewStore


@lru_cache
def get_verticals() -> dict[str, VerticalConfig]:
    return build_verticals()


@lru_cache
def get_api_client() -> ApiClient:
    return ApiClient(
        base_url=settings.API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        retry_attempts=settings.HTTP_RETRY_ATTEMPTS,
    )


def get_catalog_source() -> CatalogSourcePort:
    return HttpCatalogSource(get_api_client())


@lru_cache
def get_booking_gateway() -> BookingGatewayPort:
    logger = logging.getLogger(__name__)
    if settings.BOOKING_GATEWAY.lower() == "mock":
        logger.info("Using MockBookingGateway (BOOKING_GATEWAY=mock)")
        return MockBookingGateway({v.booking_service_type: v.booking_id_prefix for v in get_verticals().values()})
    logger.info("Using HttpBookingGateway", extra={"base_url": settings.API_BASE_URL})
    return HttpBookingGateway(get_api_client())


@lru_cache
def get_view_store() -> MemoryViewStore:
    return MemoryViewStore()


@lru_cache
def get_storefront() -> StorefrontUseCase:
    return StorefrontUseCase(
        verticals=get_verticals(),
        catalog_source=get_catalog_source(),
        gateway=get_booking_gateway(),
        views=get_view_store(),
    )
