"""Bernoulli distribution."""

from __future__ import annotations

import copy

import numpy as np
from numpy.typing import NDArray

from crand.distributions.base import draw_many
from crand.distributions.limits import Exclusive, Inclusive
from crand.distributions.uniform_real import UniformRealDistribution
from crand.engines.base import UniformRandomBitGenerator

_UNIT_INTERVAL = UniformRealDistribution(Inclusive(0.0), Exclusive(1.0))


class BernoulliDistribution:
    """Returns ``True`` with probability ``p``.

    A draw is ``u < p`` for ``u`` uniform over [0, 1). Since ``u`` never
    reaches 1, ``p = 0`` never yields ``True`` and ``p = 1`` always does.
    """

    def __init__(self, p: float = 0.5) -> None:
        assert 0.0 <= p <= 1.0, f"p must lie in [0, 1], got {p}"
        self._p = float(p)

    def __call__(self, g: UniformRandomBitGenerator) -> bool:
        return bool(_UNIT_INTERVAL(g) < self._p)

    def sample(self, g: UniformRandomBitGenerator, size: int) -> NDArray[np.bool_]:
        return draw_many(g, self, size, np.bool_)

    def p(self) -> float:
        return self._p

    def min(self) -> bool:
        return False

    def max(self) -> bool:
        return True

    def copy(self) -> BernoulliDistribution:
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BernoulliDistribution):
            return NotImplemented
        return self._p == other._p

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BernoulliDistribution(p={self._p})"
