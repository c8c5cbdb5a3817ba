"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "item",
        "booker",
        "status",
        "start",
        "end",
        "created_at",
    )
    list_filter = ("status", "start", "end")
    search_fields = ("item__name", "booker__email")
    list_select_related = ("item", "booker")
    readonly_fields = (
        "status",
        "created_at",
        "updated_at",
    )
