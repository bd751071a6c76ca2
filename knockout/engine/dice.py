"""
Dice backed by a swappable random source.
"""

from knockout.engine.errors import InvalidConfiguration
from knockout.engine.random_source import RandomSource


class Dice:
    """A die with a fixed number of sides."""

    def __init__(self, sides: int, generator: RandomSource):
        if sides < 1:
            raise InvalidConfiguration(f"A die needs at least one side, got {sides}")
        self.sides = sides
        self.generator = generator

    def roll(self) -> int:
        """
        Roll once. Maps the generator's draw onto a face with (draw % sides) + 1.

        The mapping is not perfectly uniform when sides does not divide the
        generator's range (a d6 on a 1-10 generator favours 2-5); games rely on
        this exact mapping so it is kept as is.
        """
        return (self.generator.random() % self.sides) + 1

    def roll_many(self, count: int) -> list[int]:
        """Roll count times, returning each face in order."""
        return [self.roll() for _ in range(count)]

    def __repr__(self) -> str:
        return f"Dice(sides={self.sides}, generator={self.generator!r})"
