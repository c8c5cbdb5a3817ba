"""
Availability Checker

Decides whether a user may book an item at all. Overlap with other
bookings of the same item is deliberately not checked here.
"""

from __future__ import annotations

from .entities import ItemRef
from .exceptions import ItemUnavailableError, SelfBookingError


def ensure_bookable(item: ItemRef, requester_id: int) -> None:
    if item.is_owned_by(requester_id):
        raise SelfBookingError(f"You are the owner of the item with id = {item.id}")
    if not item.available:
        raise ItemUnavailableError(f"Item with id = {item.id} is not available for rent")
