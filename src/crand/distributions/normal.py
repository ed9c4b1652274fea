"""Normal distribution via the Marsaglia polar method."""

from __future__ import annotations

import copy
from functools import lru_cache
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from crand.distributions.base import draw_many
from crand.distributions.limits import Exclusive
from crand.distributions.uniform_real import SUPPORTED_DTYPES, UniformRealDistribution
from crand.engines.base import UniformRandomBitGenerator


@lru_cache(maxsize=None)
def _open_unit_disk_axis(dtype: np.dtype[Any]) -> UniformRealDistribution:
    return UniformRealDistribution(Exclusive(-1.0), Exclusive(1.0), dtype=dtype)


class NormalDistribution:
    """Normally distributed values with the given ``mean`` and ``stddev``.

    Each accepted pair of uniform draws yields two independent normal values.
    The second one is cached and returned by the next call, so unlike the
    other distributions this one carries state: two copies only behave alike
    if their caches match, and the cache takes part in equality.
    """

    def __init__(
        self,
        mean: float = 0.0,
        stddev: float = 1.0,
        dtype: DTypeLike = np.float64,
    ) -> None:
        self._dtype = np.dtype(dtype)
        assert self._dtype in SUPPORTED_DTYPES, f"unsupported dtype {self._dtype}"
        ftype = self._dtype.type
        self._mean = ftype(mean)
        self._stddev = ftype(stddev)
        self._cache: np.floating[Any] | None = None

    def __call__(self, g: UniformRandomBitGenerator) -> np.floating[Any]:
        if self._cache is not None:
            r = self._cache
            self._cache = None
            return r

        axis = _open_unit_disk_axis(self._dtype)
        while True:
            u = axis(g)
            v = axis(g)
            s = u * u + v * v
            if 0 < s < 1:
                break
        s = np.sqrt(-2 * np.log(s) / s)
        self._cache = v * s * self._stddev + self._mean
        return u * s * self._stddev + self._mean

    def sample(self, g: UniformRandomBitGenerator, size: int) -> NDArray[np.floating[Any]]:
        """Draw ``size`` values in sequence, consuming and refilling the cache."""
        return draw_many(g, self, size, self._dtype)

    def reset(self) -> None:
        """Drop the cached value so the next call starts a fresh pair."""
        self._cache = None

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._dtype

    def mean(self) -> np.floating[Any]:
        return self._mean

    def stddev(self) -> np.floating[Any]:
        return self._stddev

    def min(self) -> np.floating[Any]:
        """Lowest finite value of the dtype; the true support is unbounded."""
        return np.finfo(self._dtype).min

    def max(self) -> np.floating[Any]:
        """Largest finite value of the dtype."""
        return np.finfo(self._dtype).max

    def copy(self) -> NormalDistribution:
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalDistribution):
            return NotImplemented
        return bool(
            self._dtype == other._dtype
            and self._mean == other._mean
            and self._stddev == other._stddev
            and self._cache == other._cache
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"NormalDistribution(mean={self._mean}, stddev={self._stddev}, "
            f"dtype={self._dtype.name})"
        )
