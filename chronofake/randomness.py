"""
Random Source Module

Uniform random sources used by the temporal generators:
- NumpyRandomSource: standalone source backed by numpy's Generator
- FakerRandomSource: shares the random.Random owned by a Faker instance
"""

import random
from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Supplies uniform doubles in [0, 1) and uniform integers in [lo, hi]"""

    def double(self) -> float: ...

    def long(self, lo: int, hi: int) -> int: ...


class NumpyRandomSource:
    """
    Random source backed by numpy.random.Generator

    Reversed integer bounds are accepted and drawn from the swapped range.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def double(self) -> float:
        return float(self.rng.random())

    def long(self, lo: int, hi: int) -> int:
        if hi < lo:
            lo, hi = hi, lo
        return int(self.rng.integers(lo, hi, endpoint=True))


class FakerRandomSource:
    """
    Random source over the random.Random a Faker generator draws from

    The random instance is looked up on each draw because
    Faker.seed_instance() replaces it.
    """

    def __init__(self, faker):
        self.faker = faker

    @property
    def rnd(self) -> random.Random:
        return self.faker.random

    def double(self) -> float:
        return self.rnd.random()

    def long(self, lo: int, hi: int) -> int:
        if hi < lo:
            lo, hi = hi, lo
        return self.rnd.randint(lo, hi)
