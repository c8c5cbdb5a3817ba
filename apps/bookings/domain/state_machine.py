"""
Booking State Machine

The single place where a booking's status is changed by the core.

    WAITING --approve--> APPROVED
    WAITING --reject---> REJECTED

APPROVED, REJECTED and CANCELED are terminal.
"""

from __future__ import annotations

from types import MappingProxyType

from .entities import Booking, BookingStatus, ItemRef
from .events import BookingStatusChanged
from .exceptions import NotOwnerError, NotWaitingError

TRANSITIONS = MappingProxyType({
    BookingStatus.WAITING: frozenset({BookingStatus.APPROVED, BookingStatus.REJECTED}),
    BookingStatus.APPROVED: frozenset(),
    BookingStatus.REJECTED: frozenset(),
    BookingStatus.CANCELED: frozenset(),
})


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in TRANSITIONS[current]


def decision_status(approved: bool) -> BookingStatus:
    return BookingStatus.APPROVED if approved else BookingStatus.REJECTED


def confirm(booking: Booking, item: ItemRef, actor_id: int, approved: bool) -> Booking:
    """
    Apply the owner's decision to a WAITING booking

    Raises:
        NotOwnerError: actor does not own the booked item
        NotWaitingError: the booking was already decided
    """
    if not item.is_owned_by(actor_id):
        raise NotOwnerError()

    target = decision_status(approved)
    if not can_transition(booking.status, target):
        raise NotWaitingError(
            f"Changing the booking status is not available: booking {booking.id} is {booking.status.value}"
        )

    old_status = booking.status
    booking.status = target
    booking.add_event(BookingStatusChanged(
        aggregate_id=booking.id,
        booking_id=booking.id,
        item_id=item.id,
        booker_id=booking.booker_id,
        actor_id=actor_id,
        old_status=old_status.value,
        new_status=target.value,
    ))
    return booking
