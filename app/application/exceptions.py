class SchedulingError(Exception):
    """Base class for failures surfaced to scheduling callers."""
    kind = "error"


class BadRequestError(SchedulingError):
    """Raised when a request is missing required fields or carries malformed values."""
    kind = "bad_request"


class OutOfHoursError(SchedulingError):
    """Raised when a booking falls outside business hours."""
    kind = "out_of_hours"


class SlotTakenError(SchedulingError):
    """Raised when a booking already starts at the requested instant."""
    kind = "slot_taken"


class BookingNotFoundError(SchedulingError):
    """Raised when no booking exists for a UID."""
    kind = "not_found"


class SchedulingApiError(SchedulingError):
    """Raised when the scheduling HTTP API answers with a non-success status."""
    kind = "api_error"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StorageError(RuntimeError):
    """Raised when the booking store cannot be written."""
    pass
