"""
Booking Domain Entities

Core business entities for the booking domain:
- Booking: Aggregate representing a user's request to use an item
- BookingStatus: Persisted lifecycle states
- UserRef / ItemRef: Read-only views of the collaborators a booking points to
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from shared.domain.base import Aggregate
from shared.domain.value_objects import TimeRange


class BookingStatus(Enum):
    """
    Booking lifecycle states

    State transitions (see state_machine.TRANSITIONS):
    - WAITING -> APPROVED (owner accepted)
    - WAITING -> REJECTED (owner declined)
    CANCELED is terminal and is never entered by the booking core.
    """
    WAITING = 'WAITING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    CANCELED = 'CANCELED'


@dataclass(frozen=True)
class UserRef:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class ItemRef:
    id: int
    name: str
    description: str
    available: bool
    owner_id: int

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id


@dataclass(kw_only=True, eq=False)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    Key invariants:
    - start < end
    - status changes only through state_machine.confirm()
    """

    item: ItemRef
    booker: UserRef
    start: datetime
    end: datetime
    status: BookingStatus = BookingStatus.WAITING

    @classmethod
    def request(cls, item: ItemRef, booker: UserRef, period: TimeRange) -> 'Booking':
        """New booking awaiting the owner's decision"""
        return cls(
            item=item,
            booker=booker,
            start=period.start,
            end=period.end,
            status=BookingStatus.WAITING,
        )

    @property
    def period(self) -> TimeRange:
        return TimeRange(self.start, self.end)

    @property
    def item_id(self) -> int:
        return self.item.id

    @property
    def booker_id(self) -> int:
        return self.booker.id

    @property
    def owner_id(self) -> int:
        return self.item.owner_id

    def is_visible_to(self, user_id: int, owner_id: int | None = None) -> bool:
        """
        Booker and item owner may read the booking

        ``owner_id`` overrides the owner recorded on the booking's item
        snapshot when the caller has a fresher one.
        """
        owner = self.item.owner_id if owner_id is None else owner_id
        return user_id in (self.booker.id, owner)

    def __str__(self):
        return f"Booking #{self.id} ({self.status.value})"

    def __repr__(self):
        return (
            f"Booking(id={self.id}, item_id={self.item.id}, booker_id={self.booker.id}, "
            f"status={self.status.value}, start={self.start.isoformat()}, end={self.end.isoformat()})"
        )
