from datetime import timedelta

import pytest

from apps.bookings.domain import state_machine
from apps.bookings.domain.entities import BookingStatus
from apps.bookings.domain.events import BookingStatusChanged
from apps.bookings.domain.exceptions import NotOwnerError, NotWaitingError


@pytest.mark.parametrize("approved, expected", [(True, BookingStatus.APPROVED), (False, BookingStatus.REJECTED)])
def test_owner_decides_waiting_booking(make_booking, item, owner, approved, expected):
    booking = make_booking(timedelta(days=1), timedelta(days=2))

    result = state_machine.confirm(booking, item, owner.id, approved)

    assert result is booking
    assert booking.status is expected
    [event] = booking.events
    assert isinstance(event, BookingStatusChanged)
    assert (event.old_status, event.new_status) == ("WAITING", expected.value)
    assert event.actor_id == owner.id


def test_second_decision_fails(make_booking, item, owner):
    booking = make_booking(timedelta(days=1), timedelta(days=2))
    state_machine.confirm(booking, item, owner.id, True)

    with pytest.raises(NotWaitingError):
        state_machine.confirm(booking, item, owner.id, False)

    assert booking.status is BookingStatus.APPROVED


@pytest.mark.parametrize("actor", ["booker", "stranger"])
def test_only_owner_may_decide(request, make_booking, item, actor):
    booking = make_booking(timedelta(days=1), timedelta(days=2))
    actor_id = request.getfixturevalue(actor).id

    with pytest.raises(NotOwnerError):
        state_machine.confirm(booking, item, actor_id, True)

    assert booking.status is BookingStatus.WAITING
    assert booking.events == []


def test_owner_check_precedes_status_check(make_booking, item, booker):
    booking = make_booking(timedelta(days=1), timedelta(days=2), status=BookingStatus.REJECTED)

    with pytest.raises(NotOwnerError):
        state_machine.confirm(booking, item, booker.id, True)


@pytest.mark.parametrize("status", [BookingStatus.APPROVED, BookingStatus.REJECTED, BookingStatus.CANCELED])
def test_terminal_states_have_no_exits(status):
    assert all(not state_machine.can_transition(status, target) for target in BookingStatus)


def test_every_status_has_a_transition_entry():
    assert set(state_machine.TRANSITIONS) == set(BookingStatus)


def test_only_waiting_has_exits():
    assert state_machine.TRANSITIONS[BookingStatus.WAITING] == {BookingStatus.APPROVED, BookingStatus.REJECTED}
