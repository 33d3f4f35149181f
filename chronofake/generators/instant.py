"""
Instant Generator Module

Random points on the global timeline as aware UTC datetimes.
"""

from datetime import datetime, timezone
from typing import Optional

from ..calendar_math import (
    TICKS_PER_DAY,
    earliest,
    latest,
    minus,
    period_from_days,
    plus,
    total_ticks,
)
from .base import TemporalDataSet


class InstantGenerator(TemporalDataSet):
    """
    Same policies as LocalDateTimeGenerator over absolute instants

    Explicit references and bounds must be aware datetimes; results are
    expressed in UTC.
    """

    def now(self) -> datetime:
        return self.clock.now().astimezone(timezone.utc)

    def _value_or_now(self, reference: Optional[datetime]) -> datetime:
        if reference is None:
            return self.now()
        return reference.astimezone(timezone.utc)

    def past(self, days_to_go_back: int = 100, reference: Optional[datetime] = None) -> datetime:
        upper = self._value_or_now(reference)
        part = self._inclusive_ticks(TICKS_PER_DAY * days_to_go_back)
        return minus(upper, part)

    def future(self, days_to_go_forward: int = 100, reference: Optional[datetime] = None) -> datetime:
        lower = self._value_or_now(reference)
        part = self._inclusive_ticks(TICKS_PER_DAY * days_to_go_forward)
        return plus(lower, part)

    def soon(self, days: int = 10) -> datetime:
        now = self.now()
        return self.between(now, now + period_from_days(days))

    def recent(self, days: int = 10) -> datetime:
        now = self.now()
        lower = now if days == 0 else now - period_from_days(days)
        part = self._fraction_ticks(total_ticks(now - lower))
        return minus(now, part)

    def between(self, start: datetime, end: datetime) -> datetime:
        lower = earliest(start, end).astimezone(timezone.utc)
        upper = latest(start, end).astimezone(timezone.utc)
        part = self._fraction_ticks(total_ticks(upper - lower))
        return plus(lower, part)
