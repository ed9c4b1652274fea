"""Base protocol for uniform random bit generators."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any, Protocol, Self, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from crand.utils.exceptions import ContractError

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


@runtime_checkable
class UniformRandomBitGenerator(Protocol):
    """Protocol for engines producing uniform unsigned integers.

    Every call must return a value in [``min()``, ``max()``] in amortized
    constant time. ``min()`` and ``max()`` are constants of the engine type
    with ``min() < max()``.
    """

    def __call__(self) -> int:
        ...

    @classmethod
    def min(cls) -> int:
        ...

    @classmethod
    def max(cls) -> int:
        ...


def check_uniform_random_bit_generator(g: object) -> None:
    """Verify that ``g`` is shaped like a uniform random bit generator.

    Raises:
        ContractError: If ``g`` is not callable, lacks ``min``/``max``, reports
            a non-integer or empty range, or its range is not a whole number
            of bits.
    """
    if not isinstance(g, UniformRandomBitGenerator):
        raise ContractError(f"{type(g).__name__} does not provide __call__, min() and max()")
    lo = g.min()
    hi = g.max()
    if not isinstance(lo, int) or not isinstance(hi, int):
        raise ContractError(f"{type(g).__name__}.min()/max() must return integers")
    if lo < 0:
        raise ContractError(f"{type(g).__name__}.min() must be unsigned, got {lo}")
    if not lo < hi:
        raise ContractError(f"{type(g).__name__} requires min() < max(), got {lo} >= {hi}")
    span = hi - lo + 1
    if span & (span - 1):
        raise ContractError(
            f"{type(g).__name__} range [{lo}, {hi}] does not cover a whole number of bits"
        )


def engine_bit_width(g: UniformRandomBitGenerator) -> int:
    """Number of random bits produced by a single call of ``g``."""
    return (g.max() - g.min()).bit_length()


class BitEngine:
    """Shared value semantics for the concrete engines.

    Subclasses define ``state`` (a tuple of raw words), ``word_bits``,
    ``__call__`` and ``from_state``. Engines compare equal when they have the
    same type and the same raw state.
    """

    word_bits: int = 64

    @property
    def state(self) -> tuple[int, ...]:
        raise NotImplementedError

    @classmethod
    def from_state(cls, words: Sequence[int]) -> BitEngine:
        raise NotImplementedError

    @classmethod
    def min(cls) -> int:
        """Smallest value a call can return."""
        return 0

    @classmethod
    def max(cls) -> int:
        """Largest value a call can return."""
        return (1 << cls.word_bits) - 1

    @classmethod
    def dtype(cls) -> np.dtype[Any]:
        """Numpy dtype holding one engine output."""
        return np.dtype(np.uint32) if cls.word_bits == 32 else np.dtype(np.uint64)

    def __call__(self) -> int:
        raise NotImplementedError

    def discard(self, z: int) -> None:
        """Advance the state by ``z`` steps (linear in ``z``)."""
        assert z >= 0, f"cannot discard a negative number of steps: {z}"
        for _ in range(z):
            self()

    def copy(self) -> Self:
        return copy.copy(self)

    def __copy__(self) -> Self:
        return copy.deepcopy(self)

    def random_raw(self, size: int) -> NDArray[np.unsignedinteger[Any]]:
        """Draw ``size`` consecutive outputs.

        Returns:
            Array of shape (size,) holding the outputs in call order.
        """
        return np.fromiter((self() for _ in range(size)), dtype=self.dtype(), count=size)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, BitEngine)
        return self.state == other.state

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        words = ", ".join(hex(w) for w in self.state)
        return f"{type(self).__name__}(state=[{words}])"
