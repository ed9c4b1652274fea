"""Uniform real distribution over the largest evenly spaced representable subset."""

from __future__ import annotations

import copy
import math
from collections.abc import Callable
from fractions import Fraction
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from crand.distributions.base import draw_many
from crand.distributions.limits import Exclusive, Inclusive, as_bound
from crand.distributions.uniform_int import UniformIntDistribution
from crand.engines.base import UniformRandomBitGenerator

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

Real = np.floating[Any]
IndexMapping = Callable[[Real, Real, Real, int, int], Real]


def compute_gamma(a: Real, b: Real) -> Real:
    """Step between the endpoint of larger magnitude and its neighbour toward the other.

    Representable values get sparser with magnitude, so this is the finest
    spacing that every part of [a, b] can still resolve.
    """
    if abs(a) <= abs(b):
        return b - np.nextafter(b, a)
    return np.nextafter(a, b) - a


def ceilint(a: Real, b: Real, g: Real) -> int:
    """Smallest integer ``n`` with ``n * g >= b - a``, computed without rounding."""
    return math.ceil((Fraction(float(b)) - Fraction(float(a))) / Fraction(float(g)))


def along(x: Real, g: Real, k: int) -> Real:
    """Return ``x + k * g`` exactly; ``x`` must be a multiple of ``g``."""
    return type(x)(int(x / g) + k) * g


def gen_inclusive_inclusive_loe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return a if k == hi else along(b, g, -k)


def gen_inclusive_inclusive_nloe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return b if k == hi else along(a, g, k)


def gen_exclusive_inclusive_loe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return along(b, g, -k)


def gen_exclusive_inclusive_nloe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return b if k == hi - 1 else along(a, g, k + 1)


def gen_inclusive_exclusive_loe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return a if k == hi else along(b, g, -k)


def gen_inclusive_exclusive_nloe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return along(a, g, k - 1)


def gen_exclusive_exclusive_loe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return along(b, g, -k)


def gen_exclusive_exclusive_nloe(a: Real, b: Real, g: Real, hi: int, k: int) -> Real:
    return along(a, g, k)


# (a inclusive, b inclusive, |a| <= |b|) -> index-to-value mapping
_GENERATORS: dict[tuple[bool, bool, bool], IndexMapping] = {
    (True, True, True): gen_inclusive_inclusive_loe,
    (True, True, False): gen_inclusive_inclusive_nloe,
    (False, True, True): gen_exclusive_inclusive_loe,
    (False, True, False): gen_exclusive_inclusive_nloe,
    (True, False, True): gen_inclusive_exclusive_loe,
    (True, False, False): gen_inclusive_exclusive_nloe,
    (False, False, True): gen_exclusive_exclusive_loe,
    (False, False, False): gen_exclusive_exclusive_nloe,
}


class UniformRealDistribution:
    """Uniformly distributed floating point values over a closed or open range.

    Floating point values are not evenly spaced, so drawing ``a + r * (b - a)``
    is both biased and able to land on an excluded endpoint. Instead this
    distribution picks uniformly among the largest evenly spaced subset of
    representable values in the range: it draws an integer index ``k`` and
    maps it onto a grid of step :meth:`gamma` anchored at the endpoint of
    larger magnitude.

    Args:
        a: Lower bound; bare values are inclusive.
        b: Upper bound; bare values are inclusive.
        dtype: ``numpy.float64`` (default) or ``numpy.float32``. All values
            are computed and returned in this type.

    Preconditions (checked by assertions only):
        ``a <= b`` for a closed range and ``a < b`` otherwise, ``b - a`` must
        not overflow ``dtype``, and an open range must contain at least one
        representable value.
    """

    def __init__(
        self,
        a: Inclusive[float] | Exclusive[float] | float,
        b: Inclusive[float] | Exclusive[float] | float,
        dtype: DTypeLike = np.float64,
    ) -> None:
        lo = as_bound(a)
        hi = as_bound(b)
        self._dtype = np.dtype(dtype)
        assert self._dtype in SUPPORTED_DTYPES, f"unsupported dtype {self._dtype}"
        ftype = self._dtype.type
        self._a = ftype(lo.value)
        self._b = ftype(hi.value)
        a_incl = isinstance(lo, Inclusive)
        b_incl = isinstance(hi, Inclusive)

        assert np.isfinite(self._a) and np.isfinite(self._b)
        assert float(self._b) - float(self._a) <= float(np.finfo(self._dtype).max)
        if a_incl and b_incl:
            assert self._a <= self._b, f"empty range [{self._a}, {self._b}]"
        else:
            assert self._a < self._b, f"empty range {lo} .. {hi}"
        if not a_incl and not b_incl:
            assert np.nextafter(self._a, self._b) != self._b, "open range holds no values"

        loe = bool(abs(self._a) <= abs(self._b))
        self._g = compute_gamma(self._a, self._b)
        if a_incl and b_incl:
            self._hi = ceilint(self._a, self._b, self._g) if self._g > 0 else 0
            k_lo, k_hi = 0, self._hi
        elif b_incl:
            self._hi = ceilint(self._a, self._b, self._g)
            k_lo, k_hi = 0, self._hi - 1
        elif a_incl:
            self._hi = ceilint(self._a, self._b, self._g)
            k_lo, k_hi = 1, self._hi
        else:
            self._hi = ceilint(self._a, self._b, self._g)
            k_lo, k_hi = 1, self._hi - 1

        self._kind = (a_incl, b_incl, loe)
        self._gn = _GENERATORS[self._kind]
        self._int_dist = UniformIntDistribution(Inclusive(k_lo), Inclusive(k_hi))

        # The mapping is monotone in k: decreasing when anchored at b
        first = self._gn(self._a, self._b, self._g, self._hi, k_lo)
        last = self._gn(self._a, self._b, self._g, self._hi, k_hi)
        self._min, self._max = (last, first) if loe else (first, last)

    def __call__(self, g: UniformRandomBitGenerator) -> Real:
        k = self._int_dist(g)
        return self._gn(self._a, self._b, self._g, self._hi, k)

    def sample(self, g: UniformRandomBitGenerator, size: int) -> NDArray[Real]:
        """Draw ``size`` values in sequence.

        Returns:
            Array of shape (size,) with the distribution's dtype.
        """
        return draw_many(g, self, size, self._dtype)

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._dtype

    def a(self) -> Real:
        """The ``a`` bound as passed to the constructor."""
        return self._a

    def b(self) -> Real:
        """The ``b`` bound as passed to the constructor."""
        return self._b

    def min(self) -> Real:
        return self._min

    def max(self) -> Real:
        return self._max

    def gamma(self) -> Real:
        """Smallest difference between two values this distribution can produce."""
        return self._g

    def num_unique_values(self) -> int:
        """Number of distinct values this distribution can produce."""
        return self._int_dist.max() - self._int_dist.min() + 1

    def copy(self) -> UniformRealDistribution:
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniformRealDistribution):
            return NotImplemented
        return bool(
            self._dtype == other._dtype
            and self._kind == other._kind
            and self._a == other._a
            and self._b == other._b
            and self._g == other._g
            and self._hi == other._hi
            and self._int_dist == other._int_dist
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        left = "[" if self._kind[0] else "("
        right = "]" if self._kind[1] else ")"
        return (
            f"UniformRealDistribution({left}{self._a}, {self._b}{right}, "
            f"gamma={self._g}, dtype={self._dtype.name})"
        )
