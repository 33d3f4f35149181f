"""
Calendar Arithmetic Module

Tick-based helpers over datetime/timedelta:
- Conversion between tick counts and periods
- Adding/subtracting periods to local points
- Min/max of two points in time

A tick is one microsecond, the resolution of datetime.
"""

from datetime import datetime, timedelta

TICKS_PER_SECOND = 1_000_000
TICKS_PER_DAY = 86_400 * TICKS_PER_SECOND


def period_from_ticks(ticks: int) -> timedelta:
    """Build a signed period from a whole number of ticks"""
    return timedelta(microseconds=ticks)


def period_from_days(days: int) -> timedelta:
    return timedelta(days=days)


def total_ticks(period: timedelta) -> int:
    """
    Exact number of ticks in a period

    Args:
        period: Signed timedelta

    Returns:
        Tick count (negative for negative periods)
    """
    return (period.days * 86_400 + period.seconds) * TICKS_PER_SECOND + period.microseconds


def round_ticks(ticks: float) -> int:
    """Round a fractional tick count to the nearest tick (half to even)"""
    return int(round(ticks))


def plus(point: datetime, ticks: int) -> datetime:
    return point + period_from_ticks(ticks)


def minus(point: datetime, ticks: int) -> datetime:
    return point - period_from_ticks(ticks)


def earliest(a: datetime, b: datetime) -> datetime:
    return a if a <= b else b


def latest(a: datetime, b: datetime) -> datetime:
    return a if a >= b else b
