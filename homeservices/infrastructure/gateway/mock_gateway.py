from __future__ import annotations

import logging
from typing import Any

from homeservices.application.exceptions import GatewayRejected
from homeservices.application.ports.booking_gateway import BookingGatewayPort
from homeservices.domain.entities.booking import BookingResult


class MockBookingGateway(BookingGatewayPort):
    """In-memory bookings backend for local runs: sequential <PREFIX>-BK-000001 ids, trackable by id + phone."""

    def __init__(self, prefixes: dict[str, str] | None = None) -> None:
        self._prefixes = dict(prefixes or {})
        self._bookings: dict[str, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    def create_booking(self, path: str, payload: dict[str, Any], token: str | None = None) -> BookingResult:
        prefix = self._prefixes.get(str(payload.get("serviceType")), "BK")
        booking_id = f"{prefix}-BK-{len(self._bookings) + 1:06d}"
        record = {**payload, "bookingId": booking_id, "status": "pending"}
        self._bookings[booking_id] = record
        self._logger.info(
            "Mock booking created",
            extra={"booking_id": booking_id, "service": payload.get("serviceId")},
        )
        return BookingResult(booking_id=booking_id, status="pending", details=record)

    def track_booking(self, path: str, booking_id: str, phone: str) -> BookingResult:
        record = self._bookings.get(booking_id)
        if record is None or (record.get("customer") or {}).get("phone") != phone:
            raise GatewayRejected("Booking not found. Please check your Booking ID and phone number.", 404)
        return BookingResult(booking_id=booking_id, status=record["status"], details=record)

    def set_status(self, booking_id: str, status: str) -> bool:
        if booking_id not in self._bookings:
            return False
        self._bookings[booking_id]["status"] = status
        return True
