"""
Data Generators Module

Provides generators for temporal values:
- LocalDateTime: zone-free local points around now or explicit bounds
- Instant: absolute UTC points with the same policies
- Duration: elapsed spans up to a maximum
- Temporal: DataFrame columns built from column recipes
"""

from .local_datetime import LocalDateTimeGenerator
from .instant import InstantGenerator
from .duration import DurationGenerator, TimeDataSet
from .temporal import TemporalGenerator

__all__ = [
    "LocalDateTimeGenerator",
    "InstantGenerator",
    "DurationGenerator",
    "TimeDataSet",
    "TemporalGenerator",
]
