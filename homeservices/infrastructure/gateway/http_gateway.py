from __future__ import annotations

import logging
from typing import Any

import httpx

from homeservices.application.exceptions import GatewayRejected
from homeservices.application.ports.booking_gateway import BookingGatewayPort
from homeservices.application.ports.catalog_source import CatalogSourcePort
from homeservices.domain.entities.booking import BookingResult
from homeservices.infrastructure.gateway.api_client import ApiClient


class HttpCatalogSource(CatalogSourcePort):
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def fetch_services(self, path: str) -> dict[str, Any]:
        return self._client.get_json(path)

    def fetch_service(self, path: str, service_id: str) -> dict[str, Any]:
        return self._client.get_json(f"{path.rstrip('/')}/{service_id}")


class HttpBookingGateway(BookingGatewayPort):
    def __init__(self, client: ApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def create_booking(self, path: str, payload: dict[str, Any], token: str | None = None) -> BookingResult:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        body = self._client.post_json(path, payload, headers=headers)
        data = _success_data(body, "Failed to submit booking. Please try again.")

        booking_id = data.get("bookingId")
        if not booking_id:
            raise GatewayRejected("Booking response did not include a booking ID")

        self._logger.info("Booking created", extra={"booking_id": booking_id, "service": payload.get("serviceId")})
        return BookingResult(booking_id=str(booking_id), status=str(data.get("status") or "pending"), details=data)

    def track_booking(self, path: str, booking_id: str, phone: str) -> BookingResult:
        # A lookup is idempotent, so any transport error may be retried.
        body = self._client.post_json(
            path,
            {"bookingId": booking_id, "phone": phone},
            retry_on=(httpx.TransportError,),
        )
        data = _success_data(body, "Booking not found. Please check your details.", status_code=404)
        return BookingResult(
            booking_id=str(data.get("bookingId") or booking_id),
            status=str(data.get("status") or "pending"),
            details=data,
        )


def _success_data(body: dict[str, Any], default_message: str, status_code: int | None = None) -> dict[str, Any]:
    if body.get("success") is not True:
        raise GatewayRejected(str(body.get("message") or default_message), status_code)
    data = body.get("data")
    if not isinstance(data, dict):
        raise GatewayRejected(default_message, status_code)
    return data
