"""In-memory collaborators for exercising the booking core without a database."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from apps.bookings.domain.entities import Booking, BookingStatus, ItemRef, UserRef
from apps.bookings.domain.ports import BookingRepository, ItemDirectory, UserDirectory
from shared.application.message_bus import MessageBus

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryUserDirectory(UserDirectory):
    def __init__(self, *users: UserRef):
        self.users = {user.id: user for user in users}

    def find_by_id(self, user_id: int) -> UserRef | None:
        return self.users.get(user_id)


class InMemoryItemDirectory(ItemDirectory):
    def __init__(self, *items: ItemRef):
        self.items = {item.id: item for item in items}

    def find_by_id(self, item_id: int) -> ItemRef | None:
        return self.items.get(item_id)


class InMemoryBookingRepository(BookingRepository):
    """Stores copies so callers cannot mutate persisted state by accident."""

    def __init__(self):
        self.rows: dict[int, Booking] = {}
        self.calls: list[str] = []
        self._next_id = 1

    @staticmethod
    def _copy(booking: Booking) -> Booking:
        return replace(booking)

    def add(self, booking: Booking) -> Booking:
        self.calls.append("add")
        booking.id = self._next_id
        self._next_id += 1
        self.rows[booking.id] = self._copy(booking)
        return booking

    def put(self, booking: Booking) -> Booking:
        """Seed a booking directly, bypassing validation"""
        if booking.id is None:
            booking.id = self._next_id
        self._next_id = max(self._next_id, booking.id + 1)
        self.rows[booking.id] = self._copy(booking)
        return booking

    def get_by_id(self, booking_id: int, lock: bool = False) -> Booking | None:
        self.calls.append("get_by_id")
        row = self.rows.get(booking_id)
        return self._copy(row) if row is not None else None

    def _page(self, bookings, page: int, size: int) -> list[Booking]:
        ordered = sorted(bookings, key=lambda b: (b.start, b.id), reverse=True)
        return [self._copy(b) for b in ordered[page * size:page * size + size]]

    def find_all_by_booker(self, booker_id: int, page: int, size: int) -> list[Booking]:
        self.calls.append("find_all_by_booker")
        return self._page([b for b in self.rows.values() if b.booker_id == booker_id], page, size)

    def find_all_by_owner(self, owner_id: int, page: int, size: int) -> list[Booking]:
        self.calls.append("find_all_by_owner")
        return self._page([b for b in self.rows.values() if b.owner_id == owner_id], page, size)

    def update_status_if_waiting(self, booking_id: int, status: BookingStatus) -> bool:
        self.calls.append("update_status_if_waiting")
        row = self.rows.get(booking_id)
        if row is None or row.status is not BookingStatus.WAITING:
            return False
        row.status = status
        return True

    def find_last_approved(self, item_id: int, owner_id: int, now: datetime) -> Booking | None:
        candidates = [
            b for b in self.rows.values()
            if b.item_id == item_id and b.owner_id == owner_id
            and b.status is BookingStatus.APPROVED and b.end < now
        ]
        return max(candidates, key=lambda b: (b.end, b.id), default=None)

    def find_next_approved(self, item_id: int, owner_id: int, now: datetime) -> Booking | None:
        candidates = [
            b for b in self.rows.values()
            if b.item_id == item_id and b.owner_id == owner_id
            and b.status is BookingStatus.APPROVED and b.start > now
        ]
        return min(candidates, key=lambda b: (b.start, b.id), default=None)

    def has_finished_booking(self, booker_id: int, item_id: int, now: datetime) -> bool:
        return any(
            b.booker_id == booker_id and b.item_id == item_id and b.end < now
            for b in self.rows.values()
        )


class ImmediateUnitOfWork:
    """Publishes collected events on successful exit, drops them on error."""

    def __init__(self, bus: MessageBus):
        self.bus = bus
        self.events = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.bus.publish_events(self.events)
        self.events = []
        return False

    def collect_events(self, aggregate):
        self.events.extend(aggregate.events)
        aggregate.clear_events()
