"""Item management, item cards and comment use cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import structlog
from django.db import transaction  # type: ignore

from apps.bookings.application.query_handlers import page_index
from apps.bookings.domain.entities import Booking, ItemRef
from apps.bookings.domain.ports import BookingRepository, ItemDirectory, UserDirectory
from shared.domain.exceptions import DomainError, NotFoundError
from shared.infrastructure.clock import Clock, SystemClock

from .models import Comment, Item
from .repositories import to_item_ref

logger = structlog.get_logger(__name__)


class CommentNotAllowedError(DomainError):
    """Only the user who rented this item can leave a review"""

    code = "comment_not_allowed"


class ItemNotOwnedError(DomainError):
    """Only the owner of the item can edit information about it"""

    code = "item_not_owned"


@dataclass
class ItemCard:
    item: ItemRef
    last_booking: Booking | None = None
    next_booking: Booking | None = None
    comments: list[Comment] = field(default_factory=list)


class ItemService:
    def __init__(self, bookings: BookingRepository, users: UserDirectory,
                 items: ItemDirectory, clock: Clock | None = None):
        self.bookings = bookings
        self.users = users
        self.items = items
        self.clock = clock or SystemClock()

    def _require_user(self, user_id: int):
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError.for_entity("User", user_id)
        return user

    def _require_owned_row(self, owner_id: int, item_id: int) -> Item:
        self._require_user(owner_id)
        row = Item.objects.select_for_update().filter(pk=item_id).first()
        if row is None:
            raise NotFoundError.for_entity("Item", item_id)
        if row.owner_id != owner_id:
            raise ItemNotOwnedError()
        return row

    def _card(self, item: ItemRef, requester_id: int, now: datetime) -> ItemCard:
        return ItemCard(
            item=item,
            last_booking=self.bookings.find_last_approved(item.id, requester_id, now),
            next_booking=self.bookings.find_next_approved(item.id, requester_id, now),
            comments=list(
                Comment.objects.filter(item_id=item.id).select_related("author").order_by("created", "id")
            ),
        )

    def get_card(self, item_id: int, requester_id: int) -> ItemCard:
        """
        Item with its comments. Last/next approved bookings are only
        resolved for the owner; other viewers get None for both.
        """
        item = self.items.find_by_id(item_id)
        if item is None:
            raise NotFoundError.for_entity("Item", item_id)
        return self._card(item, requester_id, self.clock.now())

    def list_owned(self, owner_id: int, from_: int = 0, size: int = 10) -> list[ItemCard]:
        """One page of the owner's items, by id, each with its bookings and comments"""
        page = page_index(from_, size)
        self._require_user(owner_id)

        offset = page * size
        rows = Item.objects.filter(owner_id=owner_id).order_by("id")[offset:offset + size]
        now = self.clock.now()
        return [self._card(to_item_ref(row), owner_id, now) for row in rows]

    def create(self, owner_id: int, name: str, description: str, available: bool) -> ItemRef:
        owner = self._require_user(owner_id)
        row = Item.objects.create(
            name=name,
            description=description,
            available=available,
            owner_id=owner.id,
        )
        logger.info("item_created", item_id=row.pk, owner_id=owner.id)
        return to_item_ref(row)

    def update(self, owner_id: int, item_id: int, **changes) -> ItemRef:
        """
        Partial update of ``name``, ``description`` and ``available``

        Fields left out of ``changes`` (or passed as None) keep their value.
        """
        with transaction.atomic():
            row = self._require_owned_row(owner_id, item_id)
            updated = []
            for name in ("name", "description", "available"):
                value = changes.get(name)
                if value is not None:
                    setattr(row, name, value)
                    updated.append(name)
            if updated:
                row.save(update_fields=updated)

        logger.info("item_updated", item_id=row.pk, owner_id=owner_id, fields=updated)
        return to_item_ref(row)

    def delete(self, owner_id: int, item_id: int) -> None:
        """Remove the item together with its bookings and comments"""
        with transaction.atomic():
            row = self._require_owned_row(owner_id, item_id)
            row.delete()
        logger.info("item_deleted", item_id=item_id, owner_id=owner_id)

    def add_comment(self, author_id: int, item_id: int, text: str) -> Comment:
        item = self.items.find_by_id(item_id)
        if item is None:
            raise NotFoundError.for_entity("Item", item_id)
        author = self._require_user(author_id)

        now = self.clock.now()
        if not self.bookings.has_finished_booking(author.id, item.id, now):
            raise CommentNotAllowedError(f"User with id = {author.id} has no finished bookings of item {item.id}")

        with transaction.atomic():
            comment = Comment.objects.create(
                text=text,
                item_id=item.id,
                author_id=author.id,
                created=now,
            )
        logger.info("comment_added", item_id=item.id, author_id=author.id, comment_id=comment.pk)
        return comment


def get_item_service() -> ItemService:
    from apps.bookings.infrastructure.repositories import DjangoBookingRepository
    from apps.users.repositories import DjangoUserDirectory

    from .repositories import DjangoItemDirectory

    return ItemService(
        bookings=DjangoBookingRepository(),
        users=DjangoUserDirectory(),
        items=DjangoItemDirectory(),
    )
