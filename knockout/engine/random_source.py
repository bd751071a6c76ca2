"""
Random number sources.
Anything with a random() -> int method can feed a die or pick knock out numbers,
so games can be seeded for reproducibility or scripted for tests.
"""

import random
from typing import Iterable, Protocol

from knockout.config import GENERATOR_RANGE
from knockout.engine.errors import InvalidConfiguration, RandomSourceExhausted


class RandomSource(Protocol):
    """Produces an integer drawn from a fixed inclusive range."""

    def random(self) -> int:
        ...


class UniformRandomSource:
    """Uniform draws from [low, high], optionally backed by a seeded random.Random."""

    def __init__(self, low: int, high: int, rng: random.Random | None = None):
        if low > high:
            raise InvalidConfiguration(f"Invalid range [{low}, {high}]: low must not exceed high")
        self.low = low
        self.high = high
        self._rng = rng if rng is not None else random.Random()

    def random(self) -> int:
        return self._rng.randint(self.low, self.high)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(low={self.low}, high={self.high})"


class OneThroughTen(UniformRandomSource):
    """Generator used by the game's dice."""

    def __init__(self, rng: random.Random | None = None):
        super().__init__(GENERATOR_RANGE[0], GENERATOR_RANGE[1], rng)


class OneThroughOneHundred(UniformRandomSource):
    def __init__(self, rng: random.Random | None = None):
        super().__init__(1, 100, rng)


class ScriptedRandomSource:
    """
    Returns a fixed sequence of values, in order.

    Args:
        values: Values to return from successive random() calls
        cycle: If True, start over when the script runs out; otherwise raise
            RandomSourceExhausted
    """

    def __init__(self, values: Iterable[int], cycle: bool = False):
        self.values = [int(v) for v in values]
        if not self.values:
            raise InvalidConfiguration("Scripted random source needs at least one value")
        self.cycle = cycle
        self._position = 0

    @property
    def calls(self) -> int:
        """Number of values handed out so far."""
        return self._position

    def random(self) -> int:
        index = self._position
        if index >= len(self.values):
            if not self.cycle:
                raise RandomSourceExhausted(
                    f"Scripted random source exhausted after {len(self.values)} values"
                )
            index %= len(self.values)
        self._position += 1
        return self.values[index]
