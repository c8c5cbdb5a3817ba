from datetime import timedelta

import pytest

from apps.bookings.application.query_handlers import page_index
from apps.bookings.domain.exceptions import BookingValidationError
from apps.bookings.domain.validation import RULE_SIZE


@pytest.mark.parametrize(
    "from_, size, page",
    [(0, 10, 0), (5, 10, 0), (9, 10, 0), (10, 10, 1), (25, 10, 2), (-3, 10, 0), (-30, 10, 0)],
)
def test_page_index(from_, size, page):
    assert page_index(from_, size) == page


@pytest.mark.parametrize("size", [0, -1])
def test_page_size_must_be_positive(size):
    with pytest.raises(BookingValidationError) as exc_info:
        page_index(0, size)

    assert exc_info.value.rule == RULE_SIZE


def test_visibility_uses_current_owner(make_booking, booker, owner, stranger):
    booking = make_booking(timedelta(days=1), timedelta(days=2))

    assert booking.is_visible_to(booker.id)
    assert booking.is_visible_to(owner.id)
    assert not booking.is_visible_to(stranger.id)
    # item changed hands after the booking was read
    assert booking.is_visible_to(stranger.id, owner_id=stranger.id)
    assert not booking.is_visible_to(owner.id, owner_id=stranger.id)
