"""
Collaborator ports consumed by the booking core

Infrastructure provides Django ORM implementations; tests provide
in-memory ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from .entities import Booking, BookingStatus, ItemRef, UserRef


class UserDirectory(ABC):
    @abstractmethod
    def find_by_id(self, user_id: int) -> UserRef | None:
        raise NotImplementedError


class ItemDirectory(ABC):
    @abstractmethod
    def find_by_id(self, item_id: int) -> ItemRef | None:
        raise NotImplementedError

    def find_availability_and_owner(self, item_id: int) -> tuple[bool, int] | None:
        """(available, owner_id) of the item, without loading the rest of it"""
        item = self.find_by_id(item_id)
        if item is None:
            return None
        return item.available, item.owner_id


class BookingRepository(ABC):
    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """Persist a new booking and assign its id"""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, booking_id: int, lock: bool = False) -> Booking | None:
        """Load a booking; ``lock`` holds the row until the transaction ends"""
        raise NotImplementedError

    @abstractmethod
    def find_all_by_booker(self, booker_id: int, page: int, size: int) -> list[Booking]:
        """One page of the booker's bookings, newest start first"""
        raise NotImplementedError

    @abstractmethod
    def find_all_by_owner(self, owner_id: int, page: int, size: int) -> list[Booking]:
        """One page of bookings on items owned by ``owner_id``, newest start first"""
        raise NotImplementedError

    @abstractmethod
    def update_status_if_waiting(self, booking_id: int, status: BookingStatus) -> bool:
        """Conditional write; False when the booking is no longer WAITING"""
        raise NotImplementedError

    @abstractmethod
    def find_last_approved(self, item_id: int, owner_id: int, now: datetime) -> Booking | None:
        """Most recently finished APPROVED booking of the owner's item"""
        raise NotImplementedError

    @abstractmethod
    def find_next_approved(self, item_id: int, owner_id: int, now: datetime) -> Booking | None:
        """Soonest upcoming APPROVED booking of the owner's item"""
        raise NotImplementedError

    @abstractmethod
    def has_finished_booking(self, booker_id: int, item_id: int, now: datetime) -> bool:
        """Whether the booker had the item in a period that already ended"""
        raise NotImplementedError
