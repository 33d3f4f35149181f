"""
Faker provider exposing the temporal generators

Usage:
    fake = Faker()
    fake.add_provider(TemporalProvider(fake, zone_provider=zone_provider("Europe/Paris")))
    fake.local_recent(days=3)
"""

from datetime import datetime, timedelta
from typing import Optional

from faker import Faker
from faker.providers import BaseProvider

from .clock import Clock, ZoneProvider, config_zone_provider
from .config import Config
from .generators.duration import DurationGenerator
from .generators.local_datetime import LocalDateTimeGenerator
from .randomness import FakerRandomSource


class TemporalProvider(BaseProvider):
    """Local date/time and duration values drawn from Faker's own random"""

    def __init__(self, generator, zone_provider: Optional[ZoneProvider] = None, clock: Optional[Clock] = None):
        super().__init__(generator)
        source = FakerRandomSource(generator)
        self._local = LocalDateTimeGenerator(zone_provider, source, clock)
        self._durations = DurationGenerator(source, clock)

    def local_past(self, days: int = 100, reference: Optional[datetime] = None) -> datetime:
        return self._local.past(days, reference)

    def local_future(self, days: int = 100, reference: Optional[datetime] = None) -> datetime:
        return self._local.future(days, reference)

    def local_soon(self, days: int = 10) -> datetime:
        return self._local.soon(days)

    def local_recent(self, days: int = 10) -> datetime:
        return self._local.recent(days)

    def local_between(self, start: datetime, end: datetime) -> datetime:
        return self._local.between(start, end)

    def random_duration(self, maximum: Optional[timedelta] = None) -> timedelta:
        return self._durations.duration(maximum)


def build_faker(config: Config, clock: Optional[Clock] = None) -> Faker:
    """
    Faker for config.generation.locale with TemporalProvider registered

    The provider reads config.temporal.timezone on every call, and the
    instance is seeded from config.generation.seed when one is set.
    """
    fake = Faker(config.generation.locale)
    if config.generation.seed is not None:
        fake.seed_instance(config.generation.seed)
    fake.add_provider(TemporalProvider(fake, config_zone_provider(config), clock))
    return fake
