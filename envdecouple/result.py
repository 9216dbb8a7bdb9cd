"""Result type returned by every environment lookup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a typed environment lookup.

    ``found`` is ``True`` when the variable existed and ``value`` came from it.
    On a miss ``value`` already holds the caller's default, so callers that do
    not care about the distinction can read ``value`` directly. Instances
    unpack like a ``(value, found)`` pair::

        workers, found = accessor.get_int("WORKERS", 4)
    """

    value: T
    found: bool

    @classmethod
    def hit(cls, value: T) -> "Lookup[T]":
        """Return a result for a variable that was present and accepted."""

        return cls(value=value, found=True)

    @classmethod
    def miss(cls, default: T) -> "Lookup[T]":
        """Return a result that substitutes ``default``."""

        return cls(value=default, found=False)

    def __iter__(self) -> Iterator[object]:
        yield self.value
        yield self.found


__all__ = ["Lookup"]
