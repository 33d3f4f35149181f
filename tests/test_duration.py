from datetime import datetime, timedelta

import pytest

from chronofake.clock import zone_provider
from chronofake.generators import DurationGenerator, TimeDataSet
from chronofake.randomness import NumpyRandomSource


class TestDurationGenerator:

    def test_default_maximum_is_one_week(self, scripted):
        generator = DurationGenerator(scripted([0.5]))
        assert generator.duration() == timedelta(days=3, hours=12)

    def test_zero_maximum_always_zero(self):
        generator = DurationGenerator(NumpyRandomSource(seed=8))
        for _ in range(100):
            assert generator.duration(timedelta(0)) == timedelta(0)

    def test_within_zero_and_maximum(self):
        generator = DurationGenerator(NumpyRandomSource(seed=8))
        maximum = timedelta(minutes=90)
        for _ in range(500):
            assert timedelta(0) <= generator.duration(maximum) <= maximum

    def test_truncates_fractional_ticks(self, scripted):
        generator = DurationGenerator(scripted([0.26, 0.99]))
        assert generator.duration(timedelta(microseconds=10)) == timedelta(microseconds=2)
        assert generator.duration(timedelta(microseconds=10)) == timedelta(microseconds=9)


class TestTimeDataSet:

    def test_seed_makes_sequences_reproducible(self, clock):
        first = TimeDataSet(clock=clock, seed=7)
        second = TimeDataSet(clock=clock, seed=7)

        start = datetime(2020, 1, 1)
        end = datetime(2020, 1, 10)
        assert [first.local.between(start, end) for _ in range(5)] == \
            [second.local.between(start, end) for _ in range(5)]
        assert first.duration() == second.duration()

    def test_generators_share_one_source(self, clock, scripted):
        source = scripted([0.5, 0.5])
        data_set = TimeDataSet(random_source=source, clock=clock)

        assert data_set.local.random is source
        assert data_set.instant.random is source
        assert data_set.duration(timedelta(hours=2)) == timedelta(hours=1)
        assert data_set.local.recent(2) == datetime(2024, 1, 14, 12)

    def test_zone_provider_reaches_local_generator(self, clock):
        data_set = TimeDataSet(zone_provider=zone_provider("Asia/Tokyo"), clock=clock, seed=1)
        assert data_set.local.now() == datetime(2024, 1, 15, 21)

    def test_seed_with_source_is_ignored(self, clock, scripted, caplog):
        source = scripted()
        data_set = TimeDataSet(random_source=source, clock=clock, seed=3)
        assert data_set.random is source
        assert "seed ignored" in caplog.text


@pytest.mark.parametrize("days", [1, 7, 30])
def test_duration_scales_with_maximum(days):
    generator = DurationGenerator(NumpyRandomSource(seed=days))
    maximum = timedelta(days=days)
    values = [generator.duration(maximum) for _ in range(200)]
    assert max(values) <= maximum
    assert min(values) >= timedelta(0)
