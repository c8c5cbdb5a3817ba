"""DRF exception handler translating domain errors into responses."""

from __future__ import annotations

import structlog
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import DomainError

logger = structlog.get_logger(__name__)

# Ownership failures answer 404 so that foreign bookings are not disclosed.
STATUS_BY_CODE: dict[str, int] = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "no_bookings_found": status.HTTP_404_NOT_FOUND,
    "not_authorized": status.HTTP_404_NOT_FOUND,
    "not_owner": status.HTTP_404_NOT_FOUND,
    "self_booking": status.HTTP_404_NOT_FOUND,
    "item_not_owned": status.HTTP_404_NOT_FOUND,
    "validation_error": status.HTTP_400_BAD_REQUEST,
    "unavailable": status.HTTP_400_BAD_REQUEST,
    "not_waiting": status.HTTP_400_BAD_REQUEST,
    "unknown_state": status.HTTP_400_BAD_REQUEST,
    "comment_not_allowed": status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: DomainError) -> int:
    return STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)


def domain_exception_handler(exc, context):
    """Render ``DomainError`` as ``{"error", "code"}``; defer everything else to DRF."""

    if isinstance(exc, DomainError):
        view = context.get("view")
        status_code = status_for(exc)
        logger.info(
            "domain_error",
            code=exc.code,
            error=exc.message,
            status=status_code,
            view=view.__class__.__name__ if view is not None else None,
        )
        return Response({"error": exc.message, "code": exc.code}, status=status_code)

    return exception_handler(exc, context)
