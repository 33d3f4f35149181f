"""
Clock and time zone helpers

"Now" as a local calendar point is computed from an injected clock and a
zero-argument zone provider, resolved on every call.
"""

from datetime import datetime, timezone, tzinfo
from typing import Callable, Protocol
from zoneinfo import ZoneInfo

ZoneProvider = Callable[[], tzinfo]


class Clock(Protocol):
    """Returns the current instant as an aware datetime"""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant"""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise ValueError("FixedClock needs an aware datetime")
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def utc_zone() -> tzinfo:
    return timezone.utc


def zone_provider(name: str) -> ZoneProvider:
    """
    Provider for a named IANA zone

    The lookup happens when the provider is called, so a bad name
    surfaces as ZoneInfoNotFoundError at that point.
    """
    def provide() -> tzinfo:
        return ZoneInfo(name)

    return provide


def config_zone_provider(config) -> ZoneProvider:
    """Provider that reads config.temporal.timezone each time it is called"""
    def provide() -> tzinfo:
        return ZoneInfo(config.temporal.timezone)

    return provide


def local_now(clock: Clock, zones: ZoneProvider) -> datetime:
    """Current instant converted to a zone-free local point"""
    return clock.now().astimezone(zones()).replace(tzinfo=None)
