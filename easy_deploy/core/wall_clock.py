"""Time sources used to stamp deployments"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class WallClock(ABC):
    """Supplies the current UTC time"""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime"""
        pass


class SystemClock(WallClock):
    """Wall clock backed by the system time"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(WallClock):
    """Controllable clock for deterministic deployments

    Naive datetimes are taken to be UTC.
    """

    def __init__(self, current: datetime):
        if current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        self.current = current.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> 'FakeClock':
        """Return a new clock moved forward by ``delta``"""
        return FakeClock(self.current + delta)

    def __repr__(self) -> str:
        return f"FakeClock({self.current.isoformat()})"
