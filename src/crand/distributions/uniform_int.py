"""Uniform integer distribution via rejection sampling."""

from __future__ import annotations

import copy
from typing import Any

import numpy as np
from numpy.typing import NDArray

from crand.distributions.base import draw_many
from crand.distributions.limits import Exclusive, Inclusive, as_bound
from crand.engines.base import UniformRandomBitGenerator, engine_bit_width

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


def range_bit_width(lo: int, hi: int) -> int:
    """Number of bits needed to express every offset in [0, hi - lo]."""
    return (hi - lo).bit_length()


class UniformIntDistribution:
    """Uniformly distributed integers over a closed or open range.

    Each draw concatenates as many engine outputs as needed to cover the
    range, drops the excess low-order bits and rejects offsets past the end of
    the range. At least half of all candidates are accepted, so the expected
    number of rounds is below two.

    Bare bounds are treated as inclusive; wrap them in :class:`Exclusive` to
    open an end of the range. If ``min() == max()`` every draw returns that
    value without touching the engine.
    """

    def __init__(
        self,
        a: Inclusive[int] | Exclusive[int] | int,
        b: Inclusive[int] | Exclusive[int] | int,
    ) -> None:
        lo = as_bound(a)
        hi = as_bound(b)
        self._a = int(lo.value)
        self._b = int(hi.value)
        self._min = self._a + 1 if isinstance(lo, Exclusive) else self._a
        self._max = self._b - 1 if isinstance(hi, Exclusive) else self._b
        assert self._min <= self._max, f"empty integer range {lo} .. {hi}"
        self._range_bits = range_bit_width(self._min, self._max)

    def __call__(self, g: UniformRandomBitGenerator) -> int:
        engine_bits = engine_bit_width(g)
        g_min = g.min()
        span = self._max - self._min
        while True:
            result = 0
            drawn = 0
            while drawn < self._range_bits:
                result = (result << engine_bits) | (g() - g_min)
                drawn += engine_bits
            result >>= drawn - self._range_bits
            if result <= span:
                return result + self._min

    def sample(self, g: UniformRandomBitGenerator, size: int) -> NDArray[Any]:
        """Draw ``size`` integers in sequence.

        Returns:
            Array of shape (size,). The dtype is ``int64`` or ``uint64`` when
            the range fits, ``object`` otherwise.
        """
        if _INT64_MIN <= self._min and self._max <= _INT64_MAX:
            dtype: Any = np.int64
        elif 0 <= self._min and self._max <= _UINT64_MAX:
            dtype = np.uint64
        else:
            dtype = object
        return draw_many(g, self, size, dtype)

    def a(self) -> int:
        """The ``a`` bound as passed to the constructor."""
        return self._a

    def b(self) -> int:
        """The ``b`` bound as passed to the constructor."""
        return self._b

    def min(self) -> int:
        return self._min

    def max(self) -> int:
        return self._max

    @property
    def range_bits(self) -> int:
        return self._range_bits

    def copy(self) -> UniformIntDistribution:
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniformIntDistribution):
            return NotImplemented
        return (self._a, self._b, self._min, self._max) == (
            other._a,
            other._b,
            other._min,
            other._max,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UniformIntDistribution(min={self._min}, max={self._max})"
