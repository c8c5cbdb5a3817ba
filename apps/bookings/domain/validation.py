"""
Temporal Validator

Sanity checks for a requested booking interval. Rules are evaluated in a
fixed order and the first violation wins:

1. ``start`` is given and is not before ``now``
2. ``end`` is given and is not before ``now``
3. ``end`` is strictly after ``start``
"""

from __future__ import annotations

from datetime import datetime

from shared.domain.value_objects import TimeRange

from .exceptions import BookingValidationError

RULE_START = "start"
RULE_END = "end"
RULE_ORDER = "order"
RULE_SIZE = "size"


def validate_interval(start: datetime | None, end: datetime | None, now: datetime) -> TimeRange:
    """Return the validated period or raise ``BookingValidationError``."""

    if start is None:
        raise BookingValidationError("The start date of the reservation is required", rule=RULE_START)
    if start < now:
        raise BookingValidationError(
            f"The start date of the reservation {start.isoformat()} is in the past",
            rule=RULE_START,
        )

    if end is None:
        raise BookingValidationError("The end date of the reservation is required", rule=RULE_END)
    if end < now:
        raise BookingValidationError(
            f"The end date of the reservation {end.isoformat()} is in the past",
            rule=RULE_END,
        )

    if end <= start:
        raise BookingValidationError(
            "The end date of the reservation must be later than the start date",
            rule=RULE_ORDER,
        )

    return TimeRange(start, end)
