"""User directory backed by the Django ORM."""

from __future__ import annotations

from apps.bookings.domain.entities import UserRef
from apps.bookings.domain.ports import UserDirectory

from .models import User


def to_user_ref(user: User) -> UserRef:
    return UserRef(id=user.id, name=user.name, email=user.email)


class DjangoUserDirectory(UserDirectory):
    def find_by_id(self, user_id: int) -> UserRef | None:
        user = User.objects.filter(pk=user_id).first()
        return to_user_ref(user) if user is not None else None
