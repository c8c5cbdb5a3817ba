"""Business errors raised by the booking core."""

from shared.domain.exceptions import DomainError, NotFoundError

__all__ = [
    "BookingValidationError",
    "ItemUnavailableError",
    "NoBookingsFoundError",
    "NotAuthorizedError",
    "NotFoundError",
    "NotOwnerError",
    "NotWaitingError",
    "SelfBookingError",
    "UnknownStateError",
]


class BookingValidationError(DomainError):
    """Malformed booking interval."""

    code = "validation_error"

    def __init__(self, message: str, rule: str):
        super().__init__(message)
        self.rule = rule


class ItemUnavailableError(DomainError):
    """Item is not available for rent."""

    code = "unavailable"


class SelfBookingError(DomainError):
    """Owner tried to book their own item."""

    code = "self_booking"


class NotOwnerError(DomainError):
    """Only the owner of the item can change the booking status."""

    code = "not_owner"


class NotWaitingError(DomainError):
    """Booking status can no longer be changed."""

    code = "not_waiting"


class UnknownStateError(DomainError):
    """Unrecognised booking state filter."""

    code = "unknown_state"

    def __init__(self, token):
        super().__init__(f"Unknown state: {token}")
        self.token = token


class NoBookingsFoundError(DomainError):
    """No bookings found"""

    code = "no_bookings_found"


class NotAuthorizedError(DomainError):
    """Only the author of the booking or the owner of the item can get the booking information"""

    code = "not_authorized"
