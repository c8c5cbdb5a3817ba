"""API views for the booking domain."""

from __future__ import annotations

import structlog
from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.identity import actor_id_from_request

from .serializers import (
    BookingConfirmParamsSerializer,
    BookingCreateSerializer,
    BookingListParamsSerializer,
    BookingSerializer,
)
from .services import get_booking_service

logger = structlog.get_logger(__name__)

LIST_PARAMETERS = [
    OpenApiParameter("state", str, description="ALL, CURRENT, PAST, FUTURE, WAITING or REJECTED"),
    OpenApiParameter("from", int, description="Offset of the first booking, >= 0"),
    OpenApiParameter("size", int, description="Page size, > 0"),
]


class BookingViewSet(viewsets.ViewSet):
    """Create, decide on, read and list bookings on behalf of the calling user."""

    lookup_value_regex = r"\d+"
    service_factory = staticmethod(get_booking_service)

    def get_service(self):
        return self.service_factory()

    def _render(self, data, many: bool = False) -> Response:
        return Response(BookingSerializer(data, many=many).data)

    @extend_schema(request=BookingCreateSerializer, responses=BookingSerializer)
    def create(self, request):  # type: ignore
        actor_id = actor_id_from_request(request)
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        logger.debug("create_booking_requested", actor_id=actor_id, item_id=data["itemId"])
        booking = self.get_service().create(
            booker_id=actor_id,
            item_id=data["itemId"],
            start=data["start"],
            end=data["end"],
        )
        return self._render(booking)

    @extend_schema(
        request=None,
        parameters=[OpenApiParameter("approved", bool, required=True)],
        responses=BookingSerializer,
    )
    def partial_update(self, request, pk=None):  # type: ignore
        actor_id = actor_id_from_request(request)
        params = BookingConfirmParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        booking = self.get_service().confirm(
            booking_id=int(pk),
            actor_id=actor_id,
            approved=params.validated_data["approved"],
        )
        return self._render(booking)

    @extend_schema(responses=BookingSerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        actor_id = actor_id_from_request(request)
        booking = self.get_service().get_by_id(booking_id=int(pk), requester_id=actor_id)
        return self._render(booking)

    @extend_schema(parameters=LIST_PARAMETERS, responses=BookingSerializer(many=True))
    def list(self, request):  # type: ignore
        actor_id = actor_id_from_request(request)
        params = self._list_params(request)
        bookings = self.get_service().list_by_booker(
            booker_id=actor_id,
            state=params["state"],
            from_=params["from"],
            size=params["size"],
        )
        return self._render(bookings, many=True)

    @extend_schema(parameters=LIST_PARAMETERS, responses=BookingSerializer(many=True))
    @action(detail=False, methods=["get"], url_path="owner")
    def owner(self, request):  # type: ignore
        actor_id = actor_id_from_request(request)
        params = self._list_params(request)
        bookings = self.get_service().list_by_owner(
            owner_id=actor_id,
            state=params["state"],
            from_=params["from"],
            size=params["size"],
        )
        return self._render(bookings, many=True)

    @staticmethod
    def _list_params(request) -> dict:
        serializer = BookingListParamsSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data
