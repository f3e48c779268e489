"""A die composed over any ``GeneratesRandomNumbers`` source."""
from __future__ import annotations

from typing import List

from .errors import InvalidConfiguration
from .logging import get_logger
from .rng import GeneratesRandomNumbers

log = get_logger(__name__)


class Dice:
    """Roll ``[1, sides]`` using an injected random source.

    By default ``roll`` is ``(generator.random() % sides) + 1``, which is
    biased whenever the generator's range is not a multiple of ``sides``.
    ``fair=True`` rejection-samples over the generator's ``support`` instead.
    """

    def __init__(self, sides: int, generator: GeneratesRandomNumbers, *, fair: bool = False) -> None:
        if isinstance(sides, bool) or not isinstance(sides, int):
            raise InvalidConfiguration(f"Dice sides must be an integer, got {sides!r}")
        if sides <= 0:
            raise InvalidConfiguration(f"Dice sides must be positive, got {sides}")
        if isinstance(generator, type) or not callable(getattr(generator, "random", None)):
            raise InvalidConfiguration(f"{generator!r} is not a random source instance")
        if fair:
            support = getattr(generator, "support", None)
            if support is None:
                raise InvalidConfiguration(f"fair rolls need a generator with a known support, got {generator!r}")
            if len(support) < sides:
                raise InvalidConfiguration(
                    f"{generator!r} has {len(support)} outcomes, too few for a fair d{sides}"
                )
        self.sides = sides
        self.generator = generator
        self.fair = fair

    def roll(self) -> int:
        result = self._fair_roll() if self.fair else (self.generator.random() % self.sides) + 1
        log.debug("d%d rolled %d", self.sides, result)
        return result

    def roll_many(self, times: int) -> List[int]:
        if times < 0:
            raise InvalidConfiguration(f"Cannot roll a negative number of times ({times})")
        return [self.roll() for _ in range(times)]

    def _fair_roll(self) -> int:
        support = self.generator.support  # type: ignore[attr-defined]
        n = len(support)
        limit = n - n % self.sides
        while True:
            value = self.generator.random()
            if value not in support:
                raise InvalidConfiguration(f"{self.generator!r} returned {value}, outside its support")
            idx = support.index(value)
            if idx < limit:
                return idx % self.sides + 1

    def __repr__(self) -> str:
        return f"Dice(sides={self.sides}, generator={self.generator!r}, fair={self.fair})"
