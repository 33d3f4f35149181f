"""
Local Date/Time Generator Module

Random points in zone-free local calendar time:
- past / future: inside a window of days around a reference point
- soon / recent: inside a window of days around now
- between: inside two explicit bounds
"""

from datetime import datetime
from typing import Optional
import logging

from ..calendar_math import (
    TICKS_PER_DAY,
    earliest,
    latest,
    minus,
    period_from_days,
    plus,
    total_ticks,
)
from ..clock import Clock, ZoneProvider, local_now, utc_zone
from ..randomness import RandomSource
from .base import TemporalDataSet

logger = logging.getLogger(__name__)


class LocalDateTimeGenerator(TemporalDataSet):
    """
    Generates naive datetimes in the local time of a configurable zone

    "Now" is the clock's instant converted into the zone returned by
    zone_provider, looked up on every call so the active zone may change
    after construction.
    """

    def __init__(
        self,
        zone_provider: Optional[ZoneProvider] = None,
        random_source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(random_source, clock)
        self.zone_provider = zone_provider if zone_provider is not None else utc_zone
        logger.debug(f"LocalDateTimeGenerator using {type(self.random).__name__}")

    def now(self) -> datetime:
        return local_now(self.clock, self.zone_provider)

    def _value_or_now(self, reference: Optional[datetime]) -> datetime:
        return self.now() if reference is None else reference

    def past(self, days_to_go_back: int = 100, reference: Optional[datetime] = None) -> datetime:
        """
        Get a point between reference and days_to_go_back days before it

        Args:
            days_to_go_back: Size of the window in days
            reference: Upper bound (defaults to now)

        Returns:
            Naive datetime
        """
        upper = self._value_or_now(reference)
        part = self._inclusive_ticks(TICKS_PER_DAY * days_to_go_back)
        return minus(upper, part)

    def future(self, days_to_go_forward: int = 100, reference: Optional[datetime] = None) -> datetime:
        """
        Get a point between reference and days_to_go_forward days after it

        Args:
            days_to_go_forward: Size of the window in days
            reference: Lower bound (defaults to now)

        Returns:
            Naive datetime
        """
        lower = self._value_or_now(reference)
        part = self._inclusive_ticks(TICKS_PER_DAY * days_to_go_forward)
        return plus(lower, part)

    def soon(self, days: int = 10) -> datetime:
        """Get a point no more than `days` days ahead of now"""
        now = self.now()
        return self.between(now, now + period_from_days(days))

    def recent(self, days: int = 10) -> datetime:
        """Get a point within the last `days` days"""
        now = self.now()

        lower = now if days == 0 else now - period_from_days(days)

        part = self._fraction_ticks(total_ticks(now - lower))
        return minus(now, part)

    def between(self, start: datetime, end: datetime) -> datetime:
        """Get a point between start and end, in either order"""
        lower = earliest(start, end)
        upper = latest(start, end)

        part = self._fraction_ticks(total_ticks(upper - lower))
        return plus(lower, part)
