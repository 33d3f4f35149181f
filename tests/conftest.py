from datetime import datetime, timezone

import pytest

from chronofake.clock import FixedClock


class ScriptedRandom:
    """Random source replaying fixed doubles and picking an end of each integer range"""

    def __init__(self, doubles=(), pick="low"):
        self.doubles = list(doubles)
        self.pick = pick
        self.long_calls = []

    def double(self):
        return self.doubles.pop(0)

    def long(self, lo, hi):
        self.long_calls.append((lo, hi))
        return hi if self.pick == "high" else lo


@pytest.fixture
def frozen_instant():
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(frozen_instant):
    return FixedClock(frozen_instant)


@pytest.fixture
def scripted():
    return ScriptedRandom
