"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class BookingCreated(DomainEvent):
    """
    Event: A booker requested an item

    Triggers:
    - Notify the item owner that a decision is pending
    """
    booking_id: int
    item_id: int
    booker_id: int
    owner_id: int
    start: datetime
    end: datetime

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            booking_id=self.booking_id,
            item_id=self.item_id,
            booker_id=self.booker_id,
            owner_id=self.owner_id,
            start=self.start.isoformat(),
            end=self.end.isoformat(),
        )
        return data


@dataclass(kw_only=True)
class BookingStatusChanged(DomainEvent):
    """
    Event: The owner approved or rejected a booking (WAITING -> APPROVED/REJECTED)

    Triggers:
    - Notify the booker about the decision
    """
    booking_id: int
    item_id: int
    booker_id: int
    actor_id: int
    old_status: str
    new_status: str

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            booking_id=self.booking_id,
            item_id=self.item_id,
            booker_id=self.booker_id,
            actor_id=self.actor_id,
            old_status=self.old_status,
            new_status=self.new_status,
        )
        return data
