"""Things that can be addressed by a full name."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class FullyNamed(Protocol):
    @property
    def full_name(self) -> str: ...


@dataclass(frozen=True)
class Person:
    full_name: str


class Starship:
    """A ship whose full name is ``prefix + " " + name``.

    ``name`` and ``prefix`` stay mutable; ``full_name`` is recomputed on every
    read. Two ships compare equal when their rendered names match, however
    they were composed.
    """

    # mutable fields, so no stable hash
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str, prefix: Optional[str] = None) -> None:
        self.name = name
        self.prefix = prefix

    @property
    def full_name(self) -> str:
        return (self.prefix + " " if self.prefix else "") + self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Starship):
            return NotImplemented
        return self.full_name == other.full_name

    def __repr__(self) -> str:
        return f"Starship(name={self.name!r}, prefix={self.prefix!r})"


def same_full_name(a: FullyNamed, b: FullyNamed) -> bool:
    """Named equality over any two ``FullyNamed`` values."""
    return a.full_name == b.full_name


def describe_match(a: Starship, b: Starship) -> str:
    return "Same Starship!" if a == b else "Not the same Starship!"
