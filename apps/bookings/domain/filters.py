"""
Booking Query/Filter Engine

Classifies a user's bookings into query-time buckets. Time buckets
(CURRENT, PAST, FUTURE) are evaluated against ``now``; status buckets
(WAITING, REJECTED) against the stored status.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Callable, Iterable

from .entities import Booking, BookingStatus
from .exceptions import UnknownStateError


class BookingState(Enum):
    ALL = 'ALL'
    CURRENT = 'CURRENT'
    PAST = 'PAST'
    FUTURE = 'FUTURE'
    WAITING = 'WAITING'
    REJECTED = 'REJECTED'

    @classmethod
    def parse(cls, token) -> 'BookingState':
        """Exact, case-sensitive lookup by name"""
        if isinstance(token, cls):
            return token
        try:
            return cls[token]
        except (KeyError, TypeError):
            raise UnknownStateError(token) from None


Predicate = Callable[[Booking, datetime], bool]

PREDICATES: dict[BookingState, Predicate] = {
    BookingState.ALL: lambda booking, now: True,
    BookingState.CURRENT: lambda booking, now: booking.period.is_ongoing(now),
    BookingState.PAST: lambda booking, now: booking.period.is_past(now),
    BookingState.FUTURE: lambda booking, now: booking.period.is_future(now),
    BookingState.WAITING: lambda booking, now: booking.status is BookingStatus.WAITING,
    BookingState.REJECTED: lambda booking, now: booking.status is BookingStatus.REJECTED,
}


def matches(booking: Booking, state: BookingState, now: datetime) -> bool:
    return PREDICATES[state](booking, now)


def sort_key(booking: Booking):
    return booking.start, booking.id or 0


def filter_bookings(bookings: Iterable[Booking], state: BookingState, now: datetime) -> list[Booking]:
    """Bookings of ``state`` ordered by start (newest first), then id descending"""
    predicate = PREDICATES[state]
    selected = [booking for booking in bookings if predicate(booking, now)]
    return sorted(selected, key=sort_key, reverse=True)
