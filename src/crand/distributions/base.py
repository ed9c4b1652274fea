"""Base protocol for random number distributions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import DTypeLike, NDArray

from crand.engines.base import UniformRandomBitGenerator, check_uniform_random_bit_generator

R = TypeVar("R", covariant=True)


@runtime_checkable
class RandomNumberDistribution(Protocol[R]):
    """Protocol for transforms from engine output to a target distribution.

    ``d(g)`` must lie in [``d.min()``, ``d.max()``] and cost an amortized
    constant number of calls to ``g``. Distributions are copyable and compare
    equal exactly when their internal state is equal.
    """

    def __call__(self, g: UniformRandomBitGenerator) -> R:
        ...

    def min(self) -> R:
        ...

    def max(self) -> R:
        ...

    def sample(self, g: UniformRandomBitGenerator, size: int) -> np.ndarray:
        """Draw ``size`` values in sequence.

        Returns:
            Array of shape (size,).
        """
        ...


def draw_many(
    g: UniformRandomBitGenerator,
    draw: Callable[[UniformRandomBitGenerator], Any],
    size: int,
    dtype: DTypeLike,
) -> NDArray[Any]:
    """Collect ``size`` consecutive ``draw(g)`` results into an array of ``dtype``.

    Raises:
        ContractError: If ``g`` does not model a uniform random bit generator.
    """
    check_uniform_random_bit_generator(g)
    if np.dtype(dtype) == np.dtype(object):
        out = np.empty(size, dtype=object)
        for i in range(size):
            out[i] = draw(g)
        return out
    return np.fromiter((draw(g) for _ in range(size)), dtype=dtype, count=size)
