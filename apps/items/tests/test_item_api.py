"""Integration tests for the item card and comments."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.items.models import Comment, Item
from apps.users.models import User


class ItemAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.booker = User.objects.create(name="Booker", email="booker@example.com")
        self.stranger = User.objects.create(name="Stranger", email="stranger@example.com")
        self.item = Item.objects.create(name="Tent", description="Four-person tent", owner=self.owner)
        self.detail_url = reverse("item-detail", args=[self.item.pk])
        self.comment_url = reverse("item-comment", args=[self.item.pk])
        now = timezone.now()
        self.last = Booking.objects.create(
            item=self.item,
            booker=self.booker,
            start=now - timedelta(days=4),
            end=now - timedelta(days=2),
            status=Booking.Status.APPROVED,
        )
        self.next = Booking.objects.create(
            item=self.item,
            booker=self.booker,
            start=now + timedelta(days=2),
            end=now + timedelta(days=3),
            status=Booking.Status.APPROVED,
        )
        Booking.objects.create(
            item=self.item,
            booker=self.stranger,
            start=now + timedelta(days=1),
            end=now + timedelta(days=2),
            status=Booking.Status.WAITING,
        )

    def _as(self, user: User) -> dict[str, str]:
        return {"HTTP_X_SHARER_USER_ID": str(user.pk)}

    def test_owner_sees_last_and_next_booking(self) -> None:
        response = self.client.get(self.detail_url, **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["lastBooking"]["id"], self.last.pk)
        self.assertEqual(response.data["lastBooking"]["bookerId"], self.booker.pk)
        self.assertEqual(response.data["nextBooking"]["id"], self.next.pk)

    def test_other_users_see_no_bookings(self) -> None:
        response = self.client.get(self.detail_url, **self._as(self.booker))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIsNone(response.data["lastBooking"])
        self.assertIsNone(response.data["nextBooking"])
        self.assertEqual(response.data["name"], "Tent")

    def test_unknown_item(self) -> None:
        response = self.client.get(reverse("item-detail", args=[self.item.pk + 100]), **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_past_booker_can_comment(self) -> None:
        response = self.client.post(
            self.comment_url, {"text": "Dry all weekend"}, format="json", **self._as(self.booker)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["authorName"], "Booker")
        card = self.client.get(self.detail_url, **self._as(self.stranger)).data
        self.assertEqual([c["text"] for c in card["comments"]], ["Dry all weekend"])

    def test_user_without_finished_booking_cannot_comment(self) -> None:
        response = self.client.post(
            self.comment_url, {"text": "Looks nice"}, format="json", **self._as(self.stranger)
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "comment_not_allowed")
        self.assertFalse(Comment.objects.exists())

    def test_blank_comment_is_rejected(self) -> None:
        response = self.client.post(self.comment_url, {"text": ""}, format="json", **self._as(self.booker))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)


class ItemManagementAPITests(APITestCase):
    """Covers listing, creating, editing and removing items."""

    def setUp(self) -> None:
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.other = User.objects.create(name="Other", email="other@example.com")
        self.list_url = reverse("item-list")

    def _as(self, user: User) -> dict[str, str]:
        return {"HTTP_X_SHARER_USER_ID": str(user.pk)}

    def _create_item(self, **overrides) -> dict:
        payload = {"name": "Saw", "description": "Hand saw", "available": True, **overrides}
        response = self.client.post(self.list_url, payload, format="json", **self._as(self.owner))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        return response.data

    def test_create_item(self) -> None:
        data = self._create_item()

        self.assertEqual(data["ownerId"], self.owner.pk)
        self.assertTrue(data["available"])
        self.assertTrue(Item.objects.filter(pk=data["id"], owner=self.owner).exists())

    def test_create_requires_available_flag(self) -> None:
        response = self.client.post(
            self.list_url, {"name": "Saw", "description": "Hand saw"}, format="json", **self._as(self.owner)
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(Item.objects.exists())

    def test_create_for_unknown_user(self) -> None:
        response = self.client.post(
            self.list_url,
            {"name": "Saw", "description": "Hand saw", "available": True},
            format="json",
            HTTP_X_SHARER_USER_ID="999",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_owner_updates_only_given_fields(self) -> None:
        item_id = self._create_item()["id"]
        url = reverse("item-detail", args=[item_id])

        response = self.client.patch(url, {"available": False}, format="json", **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(response.data["available"])
        self.assertEqual(response.data["name"], "Saw")
        self.assertEqual(response.data["description"], "Hand saw")

    def test_form_encoded_update_keeps_availability(self) -> None:
        item_id = self._create_item()["id"]
        url = reverse("item-detail", args=[item_id])

        response = self.client.patch(url, {"name": "Big saw"}, **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        item = Item.objects.get(pk=item_id)
        self.assertEqual(item.name, "Big saw")
        self.assertTrue(item.available)

    def test_only_owner_can_update_or_delete(self) -> None:
        item_id = self._create_item()["id"]
        url = reverse("item-detail", args=[item_id])

        update = self.client.patch(url, {"name": "Mine now"}, format="json", **self._as(self.other))
        delete = self.client.delete(url, **self._as(self.other))

        self.assertEqual(update.status_code, status.HTTP_404_NOT_FOUND, update.data)
        self.assertEqual(update.data["code"], "item_not_owned")
        self.assertEqual(delete.status_code, status.HTTP_404_NOT_FOUND, delete.data)
        self.assertEqual(Item.objects.get(pk=item_id).name, "Saw")

    def test_owner_deletes_item(self) -> None:
        item_id = self._create_item()["id"]

        response = self.client.delete(reverse("item-detail", args=[item_id]), **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Item.objects.filter(pk=item_id).exists())

    def test_unavailable_item_cannot_be_booked(self) -> None:
        item_id = self._create_item(available=False)["id"]
        now = timezone.now()

        response = self.client.post(
            reverse("booking-list"),
            {
                "itemId": item_id,
                "start": (now + timedelta(days=1)).isoformat(),
                "end": (now + timedelta(days=2)).isoformat(),
            },
            format="json",
            **self._as(self.other),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "unavailable")

    def test_owner_lists_own_items_with_bookings(self) -> None:
        first = self._create_item(name="First")["id"]
        second = self._create_item(name="Second")["id"]
        Item.objects.create(name="Foreign", description="Not mine", owner=self.other)
        now = timezone.now()
        approved = Booking.objects.create(
            item_id=first,
            booker=self.other,
            start=now + timedelta(days=1),
            end=now + timedelta(days=2),
            status=Booking.Status.APPROVED,
        )

        response = self.client.get(self.list_url, **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([card["id"] for card in response.data], [first, second])
        self.assertEqual(response.data[0]["nextBooking"]["id"], approved.pk)
        self.assertIsNone(response.data[0]["lastBooking"])
        self.assertIsNone(response.data[1]["nextBooking"])

    def test_listing_pages_by_offset(self) -> None:
        ids = [self._create_item(name=f"Item {n}")["id"] for n in range(3)]

        response = self.client.get(self.list_url, {"from": 2, "size": 2}, **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([card["id"] for card in response.data], ids[2:])
