"""Random number sources usable wherever ``GeneratesRandomNumbers`` is expected.

Every reference source takes an optional ``seed`` for deterministic results
and documents its possible outputs as ``support``.
"""
from __future__ import annotations

import itertools
import random
from typing import Dict, Iterable, Optional, Protocol, Type, runtime_checkable

from .errors import InvalidConfiguration


@runtime_checkable
class GeneratesRandomNumbers(Protocol):
    def random(self) -> int: ...


class _SeededSource:
    support: range

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._r = random.Random(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r})"


class OneThroughTen(_SeededSource):
    """Uniform integers in [1, 10]."""

    support = range(1, 11)

    def random(self) -> int:
        return self._r.randint(1, 10)


class OneThroughHundred(_SeededSource):
    """Uniform integers in [1, 100]."""

    support = range(1, 101)

    def random(self) -> int:
        return self._r.randint(1, 100)


class OddThroughNineteen(_SeededSource):
    """Odd integers 1, 3, ..., 19 (``randint(1, 10) * 2 - 1``)."""

    support = range(1, 20, 2)

    def random(self) -> int:
        return self._r.randint(1, 10) * 2 - 1


class Constant:
    """Always returns ``value``."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.support = range(value, value + 1)

    def random(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class Cycle:
    """Cycles through ``values`` forever."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        if not self.values:
            raise InvalidConfiguration("Cycle needs at least one value")
        self._it = itertools.cycle(self.values)

    def random(self) -> int:
        return next(self._it)


GENERATORS: Dict[str, Type[_SeededSource]] = {
    "one-through-ten": OneThroughTen,
    "one-through-hundred": OneThroughHundred,
    "odd-through-nineteen": OddThroughNineteen,
}


def make_generator(name: str, seed: Optional[int] = None) -> GeneratesRandomNumbers:
    try:
        cls = GENERATORS[name]
    except KeyError:
        known = ", ".join(sorted(GENERATORS))
        raise InvalidConfiguration(f"Unknown generator '{name}' (known: {known})") from None
    return cls(seed=seed)
