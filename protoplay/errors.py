from __future__ import annotations


class ProtoplayError(Exception):
    """Base class for errors raised by protoplay."""


class InvalidConfiguration(ProtoplayError, ValueError):
    """A die, generator or config value was rejected at construction time."""
