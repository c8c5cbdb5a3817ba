"""User records for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class User(models.Model):
    """Platform member: lists items and books items of others."""

    name = models.CharField(_("Name"), max_length=255)
    email = models.EmailField(_("Email"), max_length=512, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
