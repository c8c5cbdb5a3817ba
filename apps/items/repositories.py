"""Item directory backed by the Django ORM."""

from __future__ import annotations

from apps.bookings.domain.entities import ItemRef
from apps.bookings.domain.ports import ItemDirectory

from .models import Item


def to_item_ref(item: Item) -> ItemRef:
    return ItemRef(
        id=item.id,
        name=item.name,
        description=item.description,
        available=item.available,
        owner_id=item.owner_id,
    )


class DjangoItemDirectory(ItemDirectory):
    def find_by_id(self, item_id: int) -> ItemRef | None:
        item = Item.objects.filter(pk=item_id).first()
        return to_item_ref(item) if item is not None else None

    def find_availability_and_owner(self, item_id: int) -> tuple[bool, int] | None:
        row = Item.objects.filter(pk=item_id).values_list("available", "owner_id").first()
        return tuple(row) if row is not None else None
