"""Booking service: the entry point the API layer talks to."""

from __future__ import annotations

from datetime import datetime

from shared.application.uow import DjangoUnitOfWork
from shared.infrastructure.clock import Clock, SystemClock

from .application.command_handlers import (
    ConfirmBookingCommand,
    ConfirmBookingHandler,
    CreateBookingCommand,
    CreateBookingHandler,
)
from .application.query_handlers import (
    GetBookingHandler,
    GetBookingQuery,
    ListBookingsHandler,
    ListBookingsQuery,
    ListRole,
)
from .domain.entities import Booking
from .domain.ports import BookingRepository, ItemDirectory, UserDirectory


class BookingService:
    """Composes the booking use cases over one set of collaborators."""

    def __init__(
        self,
        bookings: BookingRepository,
        users: UserDirectory,
        items: ItemDirectory,
        clock: Clock | None = None,
        uow_factory=DjangoUnitOfWork,
    ):
        self.clock = clock or SystemClock()
        self._create = CreateBookingHandler(bookings, users, items, self.clock, uow_factory)
        self._confirm = ConfirmBookingHandler(bookings, users, items, uow_factory)
        self._get = GetBookingHandler(bookings, items)
        self._list = ListBookingsHandler(bookings, users, self.clock)

    def get_by_id(self, booking_id: int, requester_id: int) -> Booking:
        return self._get.handle(GetBookingQuery(booking_id=booking_id, requester_id=requester_id))

    def create(self, booker_id: int, item_id: int, start: datetime | None, end: datetime | None) -> Booking:
        return self._create.handle(
            CreateBookingCommand(booker_id=booker_id, item_id=item_id, start=start, end=end)
        )

    def confirm(self, booking_id: int, actor_id: int, approved: bool) -> Booking:
        return self._confirm.handle(
            ConfirmBookingCommand(booking_id=booking_id, actor_id=actor_id, approved=approved)
        )

    def list_by_booker(self, booker_id: int, state: str = "ALL", from_: int = 0, size: int = 10) -> list[Booking]:
        return self._list.handle(
            ListBookingsQuery(user_id=booker_id, role=ListRole.BOOKER, state=state, from_=from_, size=size)
        )

    def list_by_owner(self, owner_id: int, state: str = "ALL", from_: int = 0, size: int = 10) -> list[Booking]:
        return self._list.handle(
            ListBookingsQuery(user_id=owner_id, role=ListRole.OWNER, state=state, from_=from_, size=size)
        )


def get_booking_service() -> BookingService:
    """Service wired to the Django ORM collaborators and the wall clock."""

    from apps.items.repositories import DjangoItemDirectory
    from apps.users.repositories import DjangoUserDirectory

    from .infrastructure.repositories import DjangoBookingRepository

    return BookingService(
        bookings=DjangoBookingRepository(),
        users=DjangoUserDirectory(),
        items=DjangoItemDirectory(),
        clock=SystemClock(),
    )
