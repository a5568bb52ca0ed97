from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Any, Callable

from homeservices.application.exceptions import (
    BookingValidationError,
    GatewayRejected,
    GatewayUnavailable,
    InvalidTransition,
    LoginRequired,
    SubmissionError,
)
from homeservices.application.ports.booking_gateway import BookingGatewayPort
from homeservices.application.ports.identity import IdentityProviderPort
from homeservices.application.utils.booking_ids import MockBookingIdFactory
from homeservices.application.utils.price_formatter import estimate_charge
from homeservices.application.utils.validation import resolve_time_slot, validate_draft
from homeservices.application.utils.view_lifetime import ViewLifetime
from homeservices.domain.entities.booking import BookingDraft, BookingPhase, BookingResult
from homeservices.domain.entities.identity import Identity
from homeservices.domain.entities.service import Service
from homeservices.domain.entities.vertical import VerticalConfig

SUBMISSION_FAILED_MESSAGE = "Failed to submit booking. Please try again."

_EDITABLE_PHASES = (BookingPhase.SERVICE_SELECTED, BookingPhase.FAILED)
_SELECTABLE_PHASES = (BookingPhase.IDLE, BookingPhase.SERVICE_SELECTED, BookingPhase.SUCCEEDED, BookingPhase.FAILED)


class BookingSession:
    """
    One booking attempt against one service:
    IDLE -> SERVICE_SELECTED -> SUBMITTING -> SUCCEEDED | FAILED.
    FAILED keeps the draft so the user can fix it and submit again;
    SUCCEEDED clears the draft and keeps the result until acknowledged.
    """

    def __init__(
        self,
        vertical: VerticalConfig,
        gateway: BookingGatewayPort,
        identity_provider: IdentityProviderPort | None = None,
        lifetime: ViewLifetime | None = None,
        today: Callable[[], date] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._vertical = vertical
        self._gateway = gateway
        self._identity_provider = identity_provider
        self._lifetime = lifetime or ViewLifetime(f"booking:{vertical.key}")
        self._today = today or date.today
        self._id_factory = id_factory or MockBookingIdFactory(vertical.booking_id_prefix)

        self._phase = BookingPhase.IDLE
        self._service: Service | None = None
        self._identity: Identity | None = None
        self._draft = BookingDraft()
        self._errors: dict[str, str] = {}
        self._error: str | None = None
        self._result: BookingResult | None = None
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def phase(self) -> BookingPhase:
        return self._phase

    @property
    def service(self) -> Service | None:
        return self._service

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def result(self) -> BookingResult | None:
        return self._result

    @property
    def can_submit(self) -> bool:
        return self._phase in _EDITABLE_PHASES

    def select_service(self, service: Service, identity_provider: IdentityProviderPort | None = None) -> None:
        """
        Open a draft for service. The identity is read now, from identity_provider
        when given (the caller's current credentials) or the session default.
        """
        provider = identity_provider or self._identity_provider
        identity = provider.current_identity() if provider else None

        with self._lock:
            if self._phase not in _SELECTABLE_PHASES:
                raise InvalidTransition(f"Cannot select a service while {self._phase.value}")
            if self._vertical.requires_identity and identity is None:
                raise LoginRequired(f"Sign in to book {service.title}")

            self._service = service
            self._identity = identity
            self._draft = BookingDraft()
            if identity is not None:
                self._draft.update(name=identity.name, email=identity.email, phone=identity.phone)
            self._errors = {}
            self._error = None
            self._result = None
            self._phase = BookingPhase.SERVICE_SELECTED
        self._logger.info(
            "Booking started",
            extra={"vertical": self._vertical.key, "service": service.id, "phase": BookingPhase.SERVICE_SELECTED.value},
        )

    def update_draft(self, **values: Any) -> None:
        with self._lock:
            if self._phase not in _EDITABLE_PHASES:
                raise InvalidTransition(f"Cannot edit the booking form while {self._phase.value}")
            self._draft.update(**values)
            for name in values:
                self._errors.pop(name, None)
            if self._phase == BookingPhase.FAILED:
                self._phase = BookingPhase.SERVICE_SELECTED

    def validate(self) -> dict[str, str]:
        return validate_draft(self._draft, self._vertical, self._today())

    def submit(self) -> BookingResult | None:
        """
        Validate locally, then make exactly one gateway call.
        Returns the result on success, None when the view closed mid-flight.
        Raises BookingValidationError (no network) or SubmissionError (draft kept).
        """
        with self._lock:
            if self._phase not in _EDITABLE_PHASES or self._service is None:
                raise InvalidTransition(f"Cannot submit while {self._phase.value}")

            errors = self.validate()
            if errors:
                self._errors = errors
                self._phase = BookingPhase.SERVICE_SELECTED
                raise BookingValidationError(errors)

            payload = self.build_payload()
            token = self._identity.token if self._identity else None
            self._errors = {}
            self._error = None
            self._phase = BookingPhase.SUBMITTING

        # The lock is released for the network call: a concurrent submit sees SUBMITTING.
        try:
            result = self._gateway.create_booking(self._vertical.booking_path, payload, token=token)
        except GatewayUnavailable as e:
            if not self._vertical.offline_fallback:
                return self._complete(lambda: self._fail(SUBMISSION_FAILED_MESSAGE, str(e)))
            result = BookingResult(booking_id=self._id_factory(), status="pending", is_mock=True)
            self._logger.warning(
                "Bookings backend unreachable, issuing local confirmation",
                extra={"vertical": self._vertical.key, "booking_id": result.booking_id, "reason": str(e)},
            )
        except GatewayRejected as e:
            return self._complete(lambda: self._fail(e.message or SUBMISSION_FAILED_MESSAGE, str(e)))
        except Exception as e:
            self._logger.exception(
                "Unexpected booking gateway error",
                extra={"vertical": self._vertical.key, "reason": repr(e)},
            )
            return self._complete(lambda: self._fail(SUBMISSION_FAILED_MESSAGE, repr(e)))

        return self._complete(lambda: self._succeed(result))

    def acknowledge(self) -> None:
        """Dismiss the success confirmation: SUCCEEDED -> IDLE."""
        with self._lock:
            if self._phase != BookingPhase.SUCCEEDED:
                raise InvalidTransition(f"Nothing to acknowledge while {self._phase.value}")
            self._phase = BookingPhase.IDLE
            self._service = None

    def cancel(self) -> None:
        with self._lock:
            if self._phase == BookingPhase.SUBMITTING:
                raise InvalidTransition("Cannot cancel while the booking is being submitted")
            self._phase = BookingPhase.IDLE
            self._service = None
            self._draft = BookingDraft()
            self._errors = {}
            self._error = None

    def build_payload(self) -> dict[str, Any]:
        if self._service is None:
            raise InvalidTransition("No service selected")
        draft = self._draft
        vertical = self._vertical
        start, end = resolve_time_slot(draft.time_slot, vertical)
        service_charge, tax, total = estimate_charge(self._service.pricing, vertical)

        customer: dict[str, Any] = {"name": draft.name, "email": draft.email, "phone": draft.phone}
        if draft.alternate_phone:
            customer["alternatePhone"] = draft.alternate_phone
        if self._identity is not None:
            customer["userId"] = self._identity.user_id

        address = {
            "addressLine1": draft.address_line1,
            "addressLine2": draft.address_line2,
            "city": draft.city,
            "state": draft.state,
            "pincode": draft.pincode,
        }

        pricing: dict[str, Any] = {"serviceCharge": service_charge, "total": total}
        if tax is not None:
            pricing["tax"] = tax

        payload: dict[str, Any] = {
            "serviceId": self._service.id,
            "serviceName": self._service.title,
            "serviceType": vertical.booking_service_type,
            "customer": customer,
            "serviceAddress": {k: v for k, v in address.items() if v},
            "scheduledDate": draft.scheduled_date,
            "timeSlot": {"start": start, "end": end},
            "pricing": pricing,
            "source": "Website",
        }

        requirements = {_camel(k): v for k, v in draft.requirements.items() if v}
        if set(vertical.field_schema.requirement_fields) - {"special_instructions"}:
            payload["requirements"] = requirements
        else:
            payload["serviceDetails"] = requirements or {"description": f"{vertical.display_name} booking"}
        return payload

    def _complete(self, apply: Callable[[], BookingResult | None]) -> BookingResult | None:
        with self._lock:
            return self._lifetime.guard(apply, None, reason="booking submit")

    def _succeed(self, result: BookingResult) -> BookingResult:
        self._result = result
        self._draft = BookingDraft()
        self._phase = BookingPhase.SUCCEEDED
        self._logger.info(
            "Booking submitted",
            extra={
                "vertical": self._vertical.key,
                "service": self._service.id if self._service else None,
                "booking_id": result.booking_id,
                "phase": self._phase.value,
            },
        )
        return result

    def _fail(self, message: str, reason: str) -> None:
        self._error = message
        self._phase = BookingPhase.FAILED
        self._logger.error(
            "Booking submission failed",
            extra={"vertical": self._vertical.key, "phase": self._phase.value, "reason": reason},
        )
        raise SubmissionError(message)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
