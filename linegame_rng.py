"""Seedable random source for tile values and target sums"""
import random
from typing import Optional

from linegame_config import MIN_NUMBER, MAX_NUMBER, MIN_LINE_LENGTH, MAX_LINE_LENGTH


class TileRandom:
    """
    32-bit LCG with 15-bit outputs.

    Ranges are drawn with rejection sampling so every value in an inclusive
    range is equally likely, whatever the span.
    """

    MOD = 0x8000

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.getrandbits(32)
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        """Return a pseudo-random 15-bit integer (0..32767)."""
        return (self._lcg_next() >> 16) & 0x7FFF

    def randint(self, lo: int, hi: int) -> int:
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        span = hi - lo + 1
        if span > self.MOD:
            raise ValueError(f"range [{lo}, {hi}] wider than {self.MOD}")
        limit = self.MOD - self.MOD % span
        r = self._rand()
        while r >= limit:
            r = self._rand()
        return lo + r % span

    def value(self) -> int:
        return self.randint(MIN_NUMBER, MAX_NUMBER)

    def target_sum(self) -> int:
        # Not checked against the grid: the target may be unreachable.
        return self.randint(MIN_LINE_LENGTH * MIN_NUMBER, MAX_LINE_LENGTH * MAX_NUMBER)
