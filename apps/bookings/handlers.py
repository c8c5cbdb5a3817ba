"""Default subscribers for booking domain events."""

from __future__ import annotations

import structlog

from shared.application.message_bus import MessageBus

from .domain.events import BookingCreated, BookingStatusChanged

logger = structlog.get_logger(__name__)


def log_booking_event(event) -> None:
    logger.info("booking_event", **event.to_dict())


def register_event_handlers(bus: MessageBus) -> None:
    for event_type in (BookingCreated, BookingStatusChanged):
        bus.register_event_handler(event_type, log_booking_event)
