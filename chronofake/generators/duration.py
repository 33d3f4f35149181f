"""
Duration Generator Module

Random elapsed-time spans, plus the TimeDataSet aggregate that bundles the
duration, local date/time and instant generators over one random source.
"""

from datetime import timedelta
from typing import Optional
import logging

from ..calendar_math import period_from_ticks, total_ticks
from ..clock import Clock, ZoneProvider
from ..randomness import NumpyRandomSource, RandomSource
from .base import TemporalDataSet
from .instant import InstantGenerator
from .local_datetime import LocalDateTimeGenerator

logger = logging.getLogger(__name__)

DEFAULT_MAXIMUM = timedelta(days=7)


class DurationGenerator(TemporalDataSet):
    """Generates durations between zero and a maximum"""

    def duration(self, maximum: Optional[timedelta] = None) -> timedelta:
        """
        Get a random duration

        Args:
            maximum: Upper bound, one week by default. Must not be negative.

        Returns:
            timedelta in [0, maximum], truncated to a whole tick
        """
        span = DEFAULT_MAXIMUM if maximum is None else maximum

        part = self.random.double() * total_ticks(span)

        return period_from_ticks(int(part))


class TimeDataSet:
    """
    Aggregate of the temporal generators sharing one random source

    Attributes:
        local: LocalDateTimeGenerator
        instant: InstantGenerator
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        zone_provider: Optional[ZoneProvider] = None,
        clock: Optional[Clock] = None,
        seed: Optional[int] = None,
    ):
        if random_source is None:
            random_source = NumpyRandomSource(seed)
        elif seed is not None:
            logger.warning("seed ignored because a random source was supplied")

        self.random = random_source
        self.local = LocalDateTimeGenerator(zone_provider, random_source, clock)
        self.instant = InstantGenerator(random_source, clock)
        self._durations = DurationGenerator(random_source, clock)

    def duration(self, maximum: Optional[timedelta] = None) -> timedelta:
        return self._durations.duration(maximum)
