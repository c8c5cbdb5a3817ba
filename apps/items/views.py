"""API views for items: management, item cards and comment posting."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.serializers import PageParamsSerializer
from shared.api.identity import actor_id_from_request

from .serializers import (
    CommentCreateSerializer,
    CommentSerializer,
    ItemCardSerializer,
    ItemCreateSerializer,
    ItemSerializer,
    ItemUpdateSerializer,
)
from .services import get_item_service


class ItemViewSet(viewsets.ViewSet):
    """Items of the calling user, plus cards and comments for any item."""

    lookup_value_regex = r"\d+"
    service_factory = staticmethod(get_item_service)

    @extend_schema(
        parameters=[
            OpenApiParameter("from", int, description="Offset of the first item, >= 0"),
            OpenApiParameter("size", int, description="Page size, > 0"),
        ],
        responses=ItemCardSerializer(many=True),
    )
    def list(self, request):  # type: ignore
        actor_id = actor_id_from_request(request)
        params = PageParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        cards = self.service_factory().list_owned(
            owner_id=actor_id,
            from_=params.validated_data["from"],
            size=params.validated_data["size"],
        )
        return Response(ItemCardSerializer(cards, many=True).data)

    @extend_schema(request=ItemCreateSerializer, responses=ItemSerializer)
    def create(self, request):  # type: ignore
        actor_id = actor_id_from_request(request)
        serializer = ItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.service_factory().create(owner_id=actor_id, **serializer.validated_data)
        return Response(ItemSerializer(item).data)

    @extend_schema(request=ItemUpdateSerializer, responses=ItemSerializer)
    def partial_update(self, request, pk=None):  # type: ignore
        actor_id = actor_id_from_request(request)
        serializer = ItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.service_factory().update(owner_id=actor_id, item_id=int(pk), **serializer.validated_data)
        return Response(ItemSerializer(item).data)

    @extend_schema(responses=ItemCardSerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        actor_id = actor_id_from_request(request)
        card = self.service_factory().get_card(item_id=int(pk), requester_id=actor_id)
        return Response(ItemCardSerializer(card).data)

    @extend_schema(responses=None)
    def destroy(self, request, pk=None):  # type: ignore
        actor_id = actor_id_from_request(request)
        self.service_factory().delete(owner_id=actor_id, item_id=int(pk))
        return Response()

    @extend_schema(request=CommentCreateSerializer, responses=CommentSerializer)
    @action(detail=True, methods=["post"], url_path="comment")
    def comment(self, request, pk=None):  # type: ignore
        actor_id = actor_id_from_request(request)
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = self.service_factory().add_comment(
            author_id=actor_id,
            item_id=int(pk),
            text=serializer.validated_data["text"],
        )
        return Response(CommentSerializer(comment).data)
