"""Booking persistence store on top of the Django ORM."""

from __future__ import annotations

from datetime import datetime

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.domain.ports import BookingRepository
from apps.bookings.models import Booking as BookingModel
from apps.items.repositories import to_item_ref
from apps.users.repositories import to_user_ref


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def to_domain(row: BookingModel) -> Booking:
    return Booking(
        id=row.pk,
        item=to_item_ref(row.item),
        booker=to_user_ref(row.booker),
        start=row.start,
        end=row.end,
        status=BookingStatus(row.status),
    )


class DjangoBookingRepository(BookingRepository):
    def _queryset(self):
        return BookingModel.objects.select_related("item", "booker")

    def _page(self, queryset, page: int, size: int) -> list[Booking]:
        offset = page * size
        rows = queryset.order_by("-start", "-id")[offset:offset + size]
        return [to_domain(row) for row in rows]

    def add(self, booking: Booking) -> Booking:
        row = BookingModel.objects.create(
            item_id=booking.item_id,
            booker_id=booking.booker_id,
            start=booking.start,
            end=booking.end,
            status=booking.status.value,
        )
        booking.id = row.pk
        return booking

    def get_by_id(self, booking_id: int, lock: bool = False) -> Booking | None:
        queryset = self._queryset().filter(pk=booking_id)
        if lock:
            queryset = _lock_queryset_if_possible(queryset)
        row = queryset.first()
        return to_domain(row) if row is not None else None

    def find_all_by_booker(self, booker_id: int, page: int, size: int) -> list[Booking]:
        return self._page(self._queryset().filter(booker_id=booker_id), page, size)

    def find_all_by_owner(self, owner_id: int, page: int, size: int) -> list[Booking]:
        return self._page(self._queryset().filter(item__owner_id=owner_id), page, size)

    def update_status_if_waiting(self, booking_id: int, status: BookingStatus) -> bool:
        updated = BookingModel.objects.filter(
            pk=booking_id,
            status=BookingModel.Status.WAITING,
        ).update(status=status.value)
        return updated == 1

    def find_last_approved(self, item_id: int, owner_id: int, now: datetime) -> Booking | None:
        row = (
            self._queryset()
            .filter(
                item_id=item_id,
                item__owner_id=owner_id,
                status=BookingModel.Status.APPROVED,
                end__lt=now,
            )
            .order_by("-end", "-id")
            .first()
        )
        return to_domain(row) if row is not None else None

    def find_next_approved(self, item_id: int, owner_id: int, now: datetime) -> Booking | None:
        row = (
            self._queryset()
            .filter(
                item_id=item_id,
                item__owner_id=owner_id,
                status=BookingModel.Status.APPROVED,
                start__gt=now,
            )
            .order_by("start", "id")
            .first()
        )
        return to_domain(row) if row is not None else None

    def has_finished_booking(self, booker_id: int, item_id: int, now: datetime) -> bool:
        return BookingModel.objects.filter(
            booker_id=booker_id,
            item_id=item_id,
            end__lt=now,
        ).exists()
