"""Item and comment records for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Item(models.Model):
    """Thing offered for rent by its owner."""

    name = models.CharField(_("Name"), max_length=255)
    description = models.TextField(_("Description"))
    available = models.BooleanField(
        _("Available"),
        default=True,
        help_text=_("Owner-controlled flag; unavailable items cannot be booked."),
    )
    owner = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="items",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Item")
        verbose_name_plural = _("Items")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"


class Comment(models.Model):
    """Feedback left by a user who has used the item."""

    text = models.TextField(_("Text"))
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="comments")
    author = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    created = models.DateTimeField(_("Created"))

    class Meta:
        verbose_name = _("Comment")
        verbose_name_plural = _("Comments")
        ordering = ["created", "id"]

    def __str__(self) -> str:
        return f"Comment #{self.pk} on item {self.item_id}"
