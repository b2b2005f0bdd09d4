"""Sources of the current time.

Date-dependent logic takes "now" as an argument; services get it from a
Clock so tests can pin the calendar.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from teamboard.util.error import ConfigurationError


class Clock(ABC):
    """Provides the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(Clock):
    """Wall clock in a fixed timezone."""

    def __init__(self, timezone: str = "UTC") -> None:
        try:
            self.tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown timezone: {timezone}") from e

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock(Clock):
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
