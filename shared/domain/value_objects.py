"""
Common Value Objects

Value objects used across multiple domains:
- TimeRange: Represents a booking period (start to end instant)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Time range value object

    Represents the half-open period between two timezone-aware instants.
    Construction only enforces ordering; "not in the past" is a rule of the
    booking workflow and lives in the temporal validator.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError("End must be after start")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def is_past(self, now: datetime) -> bool:
        """The whole range ended before ``now``"""
        return self.end < now

    def is_future(self, now: datetime) -> bool:
        """The range has not started yet at ``now``"""
        return self.start > now

    def is_ongoing(self, now: datetime) -> bool:
        """``now`` lies strictly inside the range"""
        return self.start < now < self.end

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"
