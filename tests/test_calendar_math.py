from datetime import datetime, timedelta

import pytest

from chronofake.calendar_math import (
    TICKS_PER_DAY,
    earliest,
    latest,
    minus,
    period_from_days,
    period_from_ticks,
    plus,
    round_ticks,
    total_ticks,
)
from chronofake.randomness import FakerRandomSource, NumpyRandomSource


class TestTicks:

    def test_ticks_per_day_is_microseconds(self):
        assert TICKS_PER_DAY == 86_400_000_000
        assert total_ticks(period_from_days(1)) == TICKS_PER_DAY

    def test_total_ticks_handles_negative_periods(self):
        assert total_ticks(timedelta(microseconds=-1)) == -1
        assert total_ticks(timedelta(days=-2, hours=3)) == -2 * TICKS_PER_DAY + 3 * 3_600_000_000

    def test_period_from_ticks(self):
        assert period_from_ticks(1_500_000) == timedelta(seconds=1, microseconds=500_000)

    @pytest.mark.parametrize("raw, expected", [(0.4, 0), (0.6, 1), (2.5, 2), (3.5, 4)])
    def test_round_ticks_to_nearest_even(self, raw, expected):
        assert round_ticks(raw) == expected


class TestPointArithmetic:

    def test_plus_and_minus(self):
        point = datetime(2020, 1, 1)
        assert plus(point, TICKS_PER_DAY) == datetime(2020, 1, 2)
        assert minus(point, 1) == datetime(2019, 12, 31, 23, 59, 59, 999_999)

    def test_earliest_and_latest(self):
        a = datetime(2020, 1, 1)
        b = datetime(2020, 1, 10)
        assert earliest(a, b) == earliest(b, a) == a
        assert latest(a, b) == latest(b, a) == b

    def test_overflow_propagates(self):
        with pytest.raises(OverflowError):
            minus(datetime.min, 1)


class TestRandomSources:

    def test_numpy_source_is_reproducible(self):
        first = NumpyRandomSource(seed=11)
        second = NumpyRandomSource(seed=11)
        assert [first.double() for _ in range(5)] == [second.double() for _ in range(5)]
        assert [first.long(0, 10**12) for _ in range(5)] == [second.long(0, 10**12) for _ in range(5)]

    def test_numpy_long_is_inclusive_and_accepts_reversed_bounds(self):
        source = NumpyRandomSource(seed=3)
        assert source.long(5, 5) == 5
        draws = [source.long(0, -10) for _ in range(200)]
        assert all(-10 <= d <= 0 for d in draws)

    def test_numpy_double_in_unit_interval(self):
        source = NumpyRandomSource(seed=5)
        assert all(0.0 <= source.double() < 1.0 for _ in range(500))

    def test_faker_source_follows_seed_instance(self):
        from faker import Faker

        fake = Faker()
        source = FakerRandomSource(fake)

        fake.seed_instance(99)
        first = [source.double() for _ in range(3)] + [source.long(0, 1000)]
        fake.seed_instance(99)
        second = [source.double() for _ in range(3)] + [source.long(0, 1000)]

        assert first == second
