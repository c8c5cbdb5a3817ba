"""Booking persistence model for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Request of a booker to use an item for a time interval."""

    class Status(models.TextChoices):
        WAITING = "WAITING", _("Waiting for approval")
        APPROVED = "APPROVED", _("Approved")
        REJECTED = "REJECTED", _("Rejected")
        CANCELED = "CANCELED", _("Canceled")

    item = models.ForeignKey(
        "items.Item",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booker = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start = models.DateTimeField(db_column="start_date")
    end = models.DateTimeField(db_column="end_date")
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.WAITING,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-start", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end__gt=models.F("start")),
                name="booking_end_after_start",
            ),
        ]
        indexes = [
            models.Index(fields=["booker", "start"], name="booking_booker_start_idx"),
            models.Index(fields=["item", "status", "start"], name="booking_item_status_start_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} of item {self.item_id} ({self.status})"
