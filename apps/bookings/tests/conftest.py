from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from apps.bookings.domain.entities import Booking, BookingStatus, ItemRef, UserRef

from .fakes import NOW


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def owner() -> UserRef:
    return UserRef(id=1, name="Owner", email="owner@example.com")


@pytest.fixture
def booker() -> UserRef:
    return UserRef(id=2, name="Booker", email="booker@example.com")


@pytest.fixture
def stranger() -> UserRef:
    return UserRef(id=3, name="Stranger", email="stranger@example.com")


@pytest.fixture
def item(owner) -> ItemRef:
    return ItemRef(id=10, name="Drill", description="Cordless drill", available=True, owner_id=owner.id)


@pytest.fixture
def make_booking(item, booker):
    counter = iter(range(100, 10_000))

    def factory(start_offset: timedelta, end_offset: timedelta,
                status: BookingStatus = BookingStatus.WAITING, booking_id: int | None = None,
                **overrides) -> Booking:
        return Booking(
            id=booking_id if booking_id is not None else next(counter),
            item=overrides.pop("item", item),
            booker=overrides.pop("booker", booker),
            start=NOW + start_offset,
            end=NOW + end_offset,
            status=status,
        )

    return factory
