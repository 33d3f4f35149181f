"""
Base class for temporal data sets

Holds the injected random source and the two tick-sampling strategies
shared by the point generators.
"""

from typing import Optional

from ..calendar_math import round_ticks
from ..clock import Clock, SystemClock
from ..randomness import NumpyRandomSource, RandomSource


class TemporalDataSet:
    """
    Base for generators that draw tick offsets from a random source

    Args:
        random_source: Uniform source; a numpy-backed one is created if omitted
        clock: Source of the current instant (system clock by default)
    """

    def __init__(self, random_source: Optional[RandomSource] = None, clock: Optional[Clock] = None):
        self.random = random_source if random_source is not None else NumpyRandomSource()
        self.clock = clock if clock is not None else SystemClock()

    def _inclusive_ticks(self, ticks: int) -> int:
        """Integer draw over [0, ticks], used by past/future"""
        return self.random.long(0, ticks)

    def _fraction_ticks(self, ticks: int) -> int:
        """Random fraction of a tick span rounded to a whole tick, used by recent/between"""
        return round_ticks(self.random.double() * ticks)
