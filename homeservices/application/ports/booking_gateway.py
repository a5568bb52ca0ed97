from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from homeservices.domain.entities.booking import BookingResult


class BookingGatewayPort(ABC):
    @abstractmethod
    def create_booking(self, path: str, payload: dict[str, Any], token: str | None = None) -> BookingResult:
        """
        Submit a booking. Returns the server-issued result.
        Raises GatewayRejected when the backend refuses it and
        GatewayUnavailable when it cannot be reached.
        """
        raise NotImplementedError

    @abstractmethod
    def track_booking(self, path: str, booking_id: str, phone: str) -> BookingResult:
        """
        Look up a booking by id and phone.
        Raises GatewayRejected (status 404 when not found) or GatewayUnavailable.
        """
        raise NotImplementedError
