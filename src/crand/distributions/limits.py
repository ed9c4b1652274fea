"""Range boundary markers for distribution constructors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Inclusive(Generic[T]):
    """Closed range boundary."""

    value: T


@dataclass(frozen=True)
class Exclusive(Generic[T]):
    """Open range boundary."""

    value: T


def as_bound(value: Inclusive[T] | Exclusive[T] | T) -> Inclusive[T] | Exclusive[T]:
    """Wrap a bare value as an inclusive bound; pass markers through."""
    if isinstance(value, (Inclusive, Exclusive)):
        return value
    return Inclusive(value)
