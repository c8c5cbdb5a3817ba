"""
Clock capability

Booking rules compare timestamps against "now". Services receive a clock
instead of calling the system time directly so tests can pin the instant.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone as dt_timezone

from django.utils import timezone  # type: ignore


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware instant"""
        raise NotImplementedError


class SystemClock(Clock):
    """Wall clock honouring Django's USE_TZ setting"""

    def now(self) -> datetime:
        return timezone.now()


class FixedClock(Clock):
    """Clock frozen at a given instant; can be moved forward by tests"""

    def __init__(self, instant: datetime):
        if timezone.is_naive(instant):
            instant = timezone.make_aware(instant, dt_timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta
