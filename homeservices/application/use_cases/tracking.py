from __future__ import annotations

import logging

from homeservices.application.exceptions import (
    BookingNotFound,
    BookingValidationError,
    GatewayRejected,
    GatewayUnavailable,
)
from homeservices.application.ports.booking_gateway import BookingGatewayPort
from homeservices.application.utils.view_lifetime import ViewLifetime
from homeservices.domain.entities.booking import BookingResult

NOT_FOUND_MESSAGE = "Booking not found. Please check your details."
UNAVAILABLE_MESSAGE = "An error occurred while tracking your booking. Please try again."


class TrackingLookup:
    """Booking status by id + phone. A failed lookup never erases the last successful one."""

    def __init__(
        self,
        gateway: BookingGatewayPort,
        track_path: str = "/bookings/track",
        lifetime: ViewLifetime | None = None,
    ) -> None:
        self._gateway = gateway
        self._track_path = track_path
        self._lifetime = lifetime or ViewLifetime("tracking")
        self._result: BookingResult | None = None
        self._error: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def result(self) -> BookingResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    def track(self, booking_id: str, phone: str) -> BookingResult | None:
        booking_id = (booking_id or "").strip()
        phone = (phone or "").strip()
        errors = {}
        if not booking_id:
            errors["booking_id"] = "Booking ID is required"
        if not phone:
            errors["phone"] = "Phone number is required"
        if errors:
            raise BookingValidationError(errors)

        try:
            result = self._gateway.track_booking(self._track_path, booking_id, phone)
        except GatewayRejected as e:
            message = e.message or NOT_FOUND_MESSAGE
            self._logger.info("Booking lookup found nothing", extra={"booking_id": booking_id, "reason": str(e)})
            return self._lifetime.guard(lambda: self._fail(BookingNotFound(message), message), None, reason="track")
        except GatewayUnavailable as e:
            self._logger.error("Booking lookup failed", extra={"booking_id": booking_id, "reason": str(e)})
            return self._lifetime.guard(lambda: self._fail(e, UNAVAILABLE_MESSAGE), None, reason="track")

        def apply() -> BookingResult:
            self._result = result
            self._error = None
            return result

        return self._lifetime.guard(apply, None, reason="track")

    def _fail(self, error: Exception, message: str) -> None:
        self._error = message
        raise error
