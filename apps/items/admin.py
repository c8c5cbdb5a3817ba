"""Admin registrations for items and comments."""

from __future__ import annotations

from django.contrib import admin

from .models import Comment, Item


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "available", "created_at")
    list_filter = ("available",)
    search_fields = ("name", "description", "owner__email")
    list_select_related = ("owner",)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "item", "author", "created")
    search_fields = ("text", "item__name", "author__email")
    list_select_related = ("item", "author")
