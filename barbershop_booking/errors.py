# barbershop_booking/errors.py

from enum import Enum


class RejectionReason(str, Enum):
    invalid_request = "invalid_request"
    slot_taken = "slot_taken"
    unavailable = "unavailable"


class BookingError(Exception):
    """Base class for reservation failures the caller is expected to handle."""

    reason: RejectionReason

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidRequestError(BookingError):
    """Missing or malformed input. Raised before anything touches storage."""

    reason = RejectionReason.invalid_request


class SlotConflictError(BookingError):
    """Another booking already holds the (barbershop, date-time) pair."""

    reason = RejectionReason.slot_taken


class StoreUnavailableError(BookingError):
    """Transient storage failure or timeout; the whole attempt may be retried."""

    reason = RejectionReason.unavailable
