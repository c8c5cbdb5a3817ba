"""Serializers for items, item cards and comments."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.serializers import BookingShortSerializer, ExplicitBooleanField, ItemSummarySerializer

from .models import Comment


class ItemCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    available = ExplicitBooleanField()


class ItemUpdateSerializer(serializers.Serializer):
    """Any subset of the editable fields; missing ones are left unchanged."""

    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False)
    available = ExplicitBooleanField(required=False)


# ``{id, name, description, available, ownerId}``, the same shape bookings embed
ItemSerializer = ItemSummarySerializer


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField(max_length=2000)


class CommentSerializer(serializers.ModelSerializer):
    authorName = serializers.ReadOnlyField(source="author.name")

    class Meta:
        model = Comment
        fields = ["id", "text", "authorName", "created"]
        read_only_fields = fields


class ItemCardSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="item.id")
    name = serializers.CharField(source="item.name")
    description = serializers.CharField(source="item.description")
    available = serializers.BooleanField(source="item.available")
    lastBooking = BookingShortSerializer(source="last_booking", allow_null=True)
    nextBooking = BookingShortSerializer(source="next_booking", allow_null=True)
    comments = CommentSerializer(many=True)
