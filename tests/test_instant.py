from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from chronofake.generators import InstantGenerator
from chronofake.randomness import NumpyRandomSource


class TestInstantGenerator:

    def test_now_is_utc(self, clock, frozen_instant):
        generator = InstantGenerator(NumpyRandomSource(seed=1), clock)
        assert generator.now() == frozen_instant
        assert generator.now().tzinfo == timezone.utc

    def test_past_and_future_windows(self, clock, frozen_instant):
        generator = InstantGenerator(NumpyRandomSource(seed=2), clock)
        for _ in range(200):
            past = generator.past(5)
            future = generator.future(5)
            assert frozen_instant - timedelta(days=5) <= past <= frozen_instant
            assert frozen_instant <= future <= frozen_instant + timedelta(days=5)

    def test_reference_in_other_zone_is_converted(self, clock, scripted):
        generator = InstantGenerator(scripted(pick="low"), clock)
        reference = datetime(2020, 6, 1, 9, 0, tzinfo=ZoneInfo("America/New_York"))

        value = generator.future(1, reference)

        assert value == reference
        assert value.tzinfo == timezone.utc
        assert value.hour == 13

    def test_between_mixed_zones(self, clock):
        generator = InstantGenerator(NumpyRandomSource(seed=3), clock)
        start = datetime(2020, 1, 1, tzinfo=ZoneInfo("Europe/Paris"))
        end = datetime(2020, 1, 2, tzinfo=timezone.utc)

        for _ in range(200):
            value = generator.between(end, start)
            assert start <= value <= end
            assert value.tzinfo == timezone.utc

    def test_recent_zero_and_soon(self, clock, frozen_instant, scripted):
        generator = InstantGenerator(scripted([0.9, 0.5]), clock)
        assert generator.recent(0) == frozen_instant
        assert generator.soon(2) == frozen_instant + timedelta(days=1)
