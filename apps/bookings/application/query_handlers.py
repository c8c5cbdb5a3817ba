"""
Booking Query Handlers

Read use cases: single booking lookup and per-user listings. No locking.
"""

from dataclasses import dataclass
from enum import Enum

import structlog

from shared.domain.exceptions import NotFoundError
from shared.infrastructure.clock import Clock
from apps.bookings.domain.entities import Booking
from apps.bookings.domain.exceptions import BookingValidationError, NoBookingsFoundError, NotAuthorizedError
from apps.bookings.domain.filters import BookingState, filter_bookings
from apps.bookings.domain.ports import BookingRepository, ItemDirectory, UserDirectory
from apps.bookings.domain.validation import RULE_SIZE

logger = structlog.get_logger(__name__)


def page_index(from_: int, size: int) -> int:
    """
    Zero-based page for an offset/limit pair

    Truncates: from_=5, size=10 reads page 0 (rows 0-9), not rows 5-14.
    Kept for compatibility with existing clients. Offsets below ``size``,
    negative ones included, read the first page.
    """
    if size < 1:
        raise BookingValidationError(f"Page size must be positive, got {size}", rule=RULE_SIZE)
    if from_ < size:
        return 0
    return from_ // size


class ListRole(Enum):
    BOOKER = 'booker'
    OWNER = 'owner'


@dataclass
class GetBookingQuery:
    booking_id: int
    requester_id: int


@dataclass
class ListBookingsQuery:
    user_id: int
    role: ListRole
    state: str = 'ALL'
    from_: int = 0
    size: int = 10


class GetBookingHandler:
    def __init__(self, booking_repo: BookingRepository, items: ItemDirectory):
        self.booking_repo = booking_repo
        self.items = items

    def handle(self, query: GetBookingQuery) -> Booking:
        booking = self.booking_repo.get_by_id(query.booking_id)
        if booking is None:
            raise NotFoundError.for_entity("Booking", query.booking_id)
        # Ownership is checked against the item as it is now, not the snapshot
        item = self.items.find_by_id(booking.item_id)
        if item is None:
            raise NotFoundError.for_entity("Item", booking.item_id)

        if not booking.is_visible_to(query.requester_id, owner_id=item.owner_id):
            raise NotAuthorizedError()

        logger.debug("booking_found", booking_id=booking.id, requester_id=query.requester_id)
        return booking


class ListBookingsHandler:
    """
    Listing for a booker or an owner

    The state token is parsed before anything else is touched. An empty
    page means the user has no bookings in that window at all; an empty
    result after filtering is a valid answer.
    """

    def __init__(self, booking_repo: BookingRepository, users: UserDirectory, clock: Clock):
        self.booking_repo = booking_repo
        self.users = users
        self.clock = clock

    def handle(self, query: ListBookingsQuery) -> list[Booking]:
        state = BookingState.parse(query.state)
        page = page_index(query.from_, query.size)

        if self.users.find_by_id(query.user_id) is None:
            raise NotFoundError.for_entity("User", query.user_id)

        if query.role is ListRole.OWNER:
            bookings = self.booking_repo.find_all_by_owner(query.user_id, page, query.size)
        else:
            bookings = self.booking_repo.find_all_by_booker(query.user_id, page, query.size)

        if not bookings:
            raise NoBookingsFoundError()

        result = filter_bookings(bookings, state, self.clock.now())
        logger.info(
            "bookings_listed",
            user_id=query.user_id,
            role=query.role.value,
            state=state.value,
            page=page,
            fetched=len(bookings),
            returned=len(result),
        )
        return result
