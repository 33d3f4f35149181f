"""
chronofake

Random dates, times and durations for test-data synthesis, sampled
uniformly inside windows anchored to now or to explicit bounds.
"""

__version__ = "1.0.0"

from .config import Config, ConfigLoader, ConfigValidator, get_default_config
from .clock import FixedClock, SystemClock, zone_provider
from .randomness import FakerRandomSource, NumpyRandomSource
from .generators import (
    DurationGenerator,
    InstantGenerator,
    LocalDateTimeGenerator,
    TemporalGenerator,
    TimeDataSet,
)
from .provider import TemporalProvider, build_faker

__all__ = [
    "Config",
    "ConfigLoader",
    "ConfigValidator",
    "get_default_config",
    "FixedClock",
    "SystemClock",
    "zone_provider",
    "FakerRandomSource",
    "NumpyRandomSource",
    "DurationGenerator",
    "InstantGenerator",
    "LocalDateTimeGenerator",
    "TemporalGenerator",
    "TimeDataSet",
    "TemporalProvider",
    "build_faker",
]
