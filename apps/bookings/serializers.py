"""Serializers for the booking API."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore
from rest_framework.fields import empty  # type: ignore


class BookingCreateSerializer(serializers.Serializer):
    """Booking request body: ``{itemId, start, end}``."""

    itemId = serializers.IntegerField()
    start = serializers.DateTimeField(required=False, allow_null=True, default=None)
    end = serializers.DateTimeField(required=False, allow_null=True, default=None)


class PageParamsSerializer(serializers.Serializer):
    """``from`` and ``size`` query parameters of paged listings."""

    size = serializers.IntegerField(required=False, min_value=1)

    def get_fields(self):
        fields = super().get_fields()
        # "from" is a keyword, so the field is declared here instead of as an attribute
        fields["from"] = serializers.IntegerField(required=False, default=0, min_value=0)
        return fields

    def validate(self, attrs):  # type: ignore
        attrs.setdefault("size", getattr(settings, "SHAREIT_DEFAULT_PAGE_SIZE", 10))
        return attrs


class BookingListParamsSerializer(PageParamsSerializer):
    """Query parameters of the booker and owner listings."""

    state = serializers.CharField(required=False, default="ALL")


class ExplicitBooleanField(serializers.BooleanField):
    """Boolean never filled in implicitly; plain DRF reads a missing form or query key as False."""

    default_empty_html = empty


class BookingConfirmParamsSerializer(serializers.Serializer):
    approved = ExplicitBooleanField()


class ItemSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    available = serializers.BooleanField()
    ownerId = serializers.IntegerField(source="owner_id")


class BookerSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()


class BookingSerializer(serializers.Serializer):
    """Full booking record with the resolved item and booker."""

    id = serializers.IntegerField()
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
    status = serializers.CharField(source="status.value")
    item = ItemSummarySerializer()
    booker = BookerSerializer()


class BookingShortSerializer(serializers.Serializer):
    """Booking as embedded in an item card."""

    id = serializers.IntegerField()
    bookerId = serializers.IntegerField(source="booker_id")
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()
