"""
Booking Command Handlers

These are the write use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- CreateBookingCommand: Request an item for a time interval
- ConfirmBookingCommand: Owner approves or rejects a WAITING booking
"""

from dataclasses import dataclass
from datetime import datetime

import structlog

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import NotFoundError
from shared.infrastructure.clock import Clock
from apps.bookings.domain import state_machine
from apps.bookings.domain.availability import ensure_bookable
from apps.bookings.domain.entities import Booking
from apps.bookings.domain.events import BookingCreated
from apps.bookings.domain.exceptions import NotWaitingError
from apps.bookings.domain.ports import BookingRepository, ItemDirectory, UserDirectory
from apps.bookings.domain.validation import validate_interval

logger = structlog.get_logger(__name__)


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    booker_id: int
    item_id: int
    start: datetime | None
    end: datetime | None


@dataclass
class ConfirmBookingCommand:
    booking_id: int
    actor_id: int
    approved: bool


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Order of checks:
    1. Booker and item resolve (NotFoundError)
    2. Temporal validation (BookingValidationError)
    3. Availability (SelfBookingError, ItemUnavailableError)
    4. Persist WAITING booking, publish BookingCreated after commit
    """

    def __init__(self, booking_repo: BookingRepository, users: UserDirectory,
                 items: ItemDirectory, clock: Clock, uow_factory=DjangoUnitOfWork):
        self.booking_repo = booking_repo
        self.users = users
        self.items = items
        self.clock = clock
        self.uow_factory = uow_factory

    def handle(self, command: CreateBookingCommand) -> Booking:
        log = logger.bind(booker_id=command.booker_id, item_id=command.item_id)

        booker = self.users.find_by_id(command.booker_id)
        if booker is None:
            raise NotFoundError.for_entity("User", command.booker_id)
        item = self.items.find_by_id(command.item_id)
        if item is None:
            raise NotFoundError.for_entity("Item", command.item_id)

        period = validate_interval(command.start, command.end, self.clock.now())
        ensure_bookable(item, booker.id)

        with self.uow_factory() as uow:
            booking = self.booking_repo.add(Booking.request(item, booker, period))
            booking.add_event(BookingCreated(
                aggregate_id=booking.id,
                booking_id=booking.id,
                item_id=item.id,
                booker_id=booker.id,
                owner_id=item.owner_id,
                start=booking.start,
                end=booking.end,
            ))
            uow.collect_events(booking)

        log.info("booking_created", booking_id=booking.id, start=booking.start.isoformat(),
                 end=booking.end.isoformat(), duration_seconds=int(period.duration.total_seconds()))
        return booking


class ConfirmBookingHandler:
    """
    Handler for the owner's decision on a booking

    The booking row is locked for the duration of the transaction and the
    status write is conditional on WAITING, so of two concurrent decisions
    only one can succeed.
    """

    def __init__(self, booking_repo: BookingRepository, users: UserDirectory,
                 items: ItemDirectory, uow_factory=DjangoUnitOfWork):
        self.booking_repo = booking_repo
        self.users = users
        self.items = items
        self.uow_factory = uow_factory

    def handle(self, command: ConfirmBookingCommand) -> Booking:
        log = logger.bind(booking_id=command.booking_id, actor_id=command.actor_id)

        with self.uow_factory() as uow:
            booking = self.booking_repo.get_by_id(command.booking_id, lock=True)
            if booking is None:
                raise NotFoundError.for_entity("Booking", command.booking_id)
            if self.users.find_by_id(command.actor_id) is None:
                raise NotFoundError.for_entity("User", command.actor_id)
            item = self.items.find_by_id(booking.item_id)
            if item is None:
                raise NotFoundError.for_entity("Item", booking.item_id)

            state_machine.confirm(booking, item, command.actor_id, command.approved)

            if not self.booking_repo.update_status_if_waiting(booking.id, booking.status):
                log.warning("booking_confirm_lost_race")
                raise NotWaitingError(
                    f"Changing the booking status is not available: booking {booking.id} was already decided"
                )
            uow.collect_events(booking)

        log.info("booking_status_changed", status=booking.status.value)
        return booking
