class DataUnavailable(RuntimeError):
    """Raised when the remote catalog cannot supply usable data (absorbed by the catalog store)."""
    pass


class GatewayError(RuntimeError):
    """Base for failures talking to the bookings/services backend."""
    pass


class GatewayUnavailable(GatewayError):
    """Raised when the backend is unreachable (connect errors, timeouts, 5xx)."""
    pass


class GatewayRejected(GatewayError):
    """Raised when the backend answers with success=false or a 4xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BookingValidationError(ValueError):
    """Raised when a booking draft fails local validation. Carries field -> message."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Booking form has invalid fields: " + ", ".join(sorted(errors)))
        self.errors = dict(errors)


class SubmissionError(RuntimeError):
    """Raised when a booking submission is rejected or cannot reach the backend."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookingNotFound(LookupError):
    """Raised when a tracking lookup finds no booking for the id and phone pair."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoginRequired(PermissionError):
    """Raised when a vertical needs an identity and none is available."""
    pass


class InvalidTransition(RuntimeError):
    """Raised when a booking session action is not allowed in its current phase."""
    pass
